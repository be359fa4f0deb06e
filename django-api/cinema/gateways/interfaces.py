"""Payment gateway contract.

Every backend is simulated; adapters translate a Payment into their own
flow and report a plain boolean. Declines, out-of-range amounts and
timeouts never raise out of `process_payment`.
"""

import logging
import random
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from cinema.domain.errors import GatewayTimeoutError, InvalidAmountError
from cinema.domain.models import Payment, PaymentStatus

logger = logging.getLogger(__name__)


class PaymentGatewayAdapter(ABC):
    """Uniform interface over a simulated external payment backend."""

    gateway_name: str = ""
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    success_rate: float = 1.0
    payment_latency: float = 0.0
    refund_latency: float = 0.0

    def __init__(
        self,
        rng: random.Random | None = None,
        latency_scale: float = 1.0,
        timeout: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._rng = rng or random.Random()
        self._latency_scale = latency_scale
        self._timeout = timeout
        self._sleep = sleep
        self._clock = clock

    def process_payment(self, payment: Payment) -> bool:
        """Charge `payment` and leave it COMPLETED or FAILED."""
        try:
            self._validate_amount(payment)
            payment.status = PaymentStatus.PROCESSING
            self._wait(self.payment_latency)
            payment.transaction_id = self._new_transaction_id()
        except (InvalidAmountError, GatewayTimeoutError) as exc:
            logger.warning("Payment %s failed: %s", payment.id, exc)
            payment.status = PaymentStatus.FAILED
            return False

        if self._rng.random() < self.success_rate:
            payment.status = PaymentStatus.COMPLETED
            logger.info(
                "%s captured %s for booking %s (%s)",
                self.gateway_name,
                payment.amount,
                payment.booking_id,
                payment.transaction_id,
            )
            return True

        payment.status = PaymentStatus.FAILED
        logger.warning(
            "%s declined payment %s for booking %s",
            self.gateway_name,
            payment.id,
            payment.booking_id,
        )
        return False

    def refund_payment(self, payment: Payment) -> bool:
        """Refund a COMPLETED payment; anything else is left untouched."""
        if payment.status is not PaymentStatus.COMPLETED:
            logger.warning(
                "Refund rejected by %s: payment %s is %s",
                self.gateway_name,
                payment.id,
                payment.status.value,
            )
            return False
        try:
            self._wait(self.refund_latency)
        except GatewayTimeoutError as exc:
            logger.warning("Refund of payment %s failed: %s", payment.id, exc)
            return False

        payment.refund_id = self._new_refund_id()
        payment.status = PaymentStatus.REFUNDED
        logger.info(
            "%s refunded %s for payment %s (%s)",
            self.gateway_name,
            payment.amount,
            payment.id,
            payment.refund_id,
        )
        return True

    @abstractmethod
    def verify_payment_status(self, transaction_id: str | None) -> str:
        """Return a coarse status derived from the shape of the id."""
        ...

    @abstractmethod
    def _new_transaction_id(self) -> str:
        ...

    @abstractmethod
    def _new_refund_id(self) -> str:
        ...

    def accepts_amount(self, amount: Decimal) -> bool:
        """Check the unrounded amount against this gateway's range."""
        if amount < 0:
            return False
        if self.min_amount is not None and amount < self.min_amount:
            return False
        if self.max_amount is not None and amount > self.max_amount:
            return False
        return True

    def _validate_amount(self, payment: Payment) -> None:
        if not self.accepts_amount(payment.amount.amount):
            raise InvalidAmountError(self.gateway_name, payment.amount)

    def _wait(self, seconds: float) -> None:
        delay = seconds * self._latency_scale
        if self._timeout is not None and delay > self._timeout:
            self._sleep(self._timeout)
            raise GatewayTimeoutError(self.gateway_name, self._timeout)
        if delay > 0:
            self._sleep(delay)

    def _hex(self, length: int) -> str:
        return f"{self._rng.getrandbits(length * 4):0{length}x}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.gateway_name!r})"
