"""Payment lifecycle service.

Services:
- Resolve the gateway for a payment method through the registry
- Keep every payment attempt and its status
- Announce outcomes on the booking subject
- Report declines, bad amounts and missing gateways as False, never by raising
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from decimal import Decimal

from cinema.domain import BookingEvent, Money, Payment, PaymentStatistics, PaymentStatus
from cinema.domain.errors import GatewayNotFoundError, InvalidAmountError
from cinema.gateways import GatewayRegistry
from cinema.observers import BookingSubject

logger = logging.getLogger(__name__)


@dataclass
class _BookingLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


def _raw_amount(amount: Money | Decimal | int | str) -> Decimal:
    if isinstance(amount, Money):
        return amount.amount
    return Decimal(str(amount))


class PaymentService:
    """Service for charging, refunding and verifying booking payments."""

    def __init__(self, subject: BookingSubject, registry: GatewayRegistry) -> None:
        self._subject = subject
        self._registry = registry
        self._payments: dict[str, Payment] = {}
        self._lock = threading.Lock()
        # entries live only while an attempt for the booking is in flight
        self._booking_locks: dict[str, _BookingLock] = {}

    @property
    def registry(self) -> GatewayRegistry:
        return self._registry

    def process_payment(
        self,
        booking_id: str,
        amount: Money | Decimal,
        method: str,
        customer_email: str,
        customer_phone: str,
    ) -> bool:
        """Charge `amount` for a booking through the gateway named by `method`."""
        try:
            gateway = self._registry.resolve(method)
        except GatewayNotFoundError as exc:
            logger.warning("Payment for booking %s not attempted: %s", booking_id, exc)
            self._notify_failed(booking_id, customer_email, customer_phone, exc.message)
            return False

        raw = _raw_amount(amount)
        if not gateway.accepts_amount(raw):
            if raw >= 0:
                rejected = Payment(
                    booking_id=booking_id,
                    amount=Money.of(raw),
                    method=method.upper(),
                    status=PaymentStatus.FAILED,
                )
                with self._lock:
                    self._payments[rejected.id] = rejected
            logger.warning(
                "Payment for booking %s failed: %s",
                booking_id,
                InvalidAmountError(gateway.gateway_name, raw),
            )
            self._notify_failed(
                booking_id,
                customer_email,
                customer_phone,
                f"Payment failed via {gateway.gateway_name}",
            )
            return False

        payment = Payment(booking_id=booking_id, amount=Money.of(raw), method=method.upper())
        with self._serialized(payment.booking_id):
            with self._lock:
                self._payments[payment.id] = payment
            success = gateway.process_payment(payment)

        if not success:
            self._notify_failed(
                booking_id,
                customer_email,
                customer_phone,
                f"Payment failed via {gateway.gateway_name}",
            )
            return False

        self._subject.notify(
            booking_id,
            BookingEvent.PAYMENT_COMPLETED,
            customer_email,
            customer_phone,
            f"Payment of ${payment.amount} via {gateway.gateway_name} - "
            f"Transaction: {payment.transaction_id}",
        )
        return True

    def refund_payment(self, payment_id: str, customer_email: str, customer_phone: str) -> bool:
        """Refund a payment through the gateway that took it."""
        payment = self._payments.get(payment_id)
        if payment is None:
            logger.warning("Refund requested for unknown payment %s", payment_id)
            return False
        gateway = self._registry.get(payment.method)
        if gateway is None:
            logger.warning("No gateway %s to refund payment %s", payment.method, payment_id)
            return False

        with self._serialized(payment.booking_id):
            success = gateway.refund_payment(payment)
        if not success:
            return False

        # there is no dedicated refund event; observers see a cancellation
        self._subject.notify(
            payment.booking_id,
            BookingEvent.CANCELLED,
            customer_email,
            customer_phone,
            f"Refund of ${payment.amount} processed via {gateway.gateway_name}",
        )
        return True

    def verify_payment(self, payment_id: str) -> str:
        payment = self._payments.get(payment_id)
        if payment is None:
            return "PAYMENT_NOT_FOUND"
        gateway = self._registry.get(payment.method)
        if gateway is None:
            return "GATEWAY_NOT_FOUND"
        return gateway.verify_payment_status(payment.transaction_id)

    def get_payment(self, payment_id: str) -> Payment | None:
        return self._payments.get(payment_id)

    def get_payment_by_booking_id(self, booking_id: str) -> Payment | None:
        """Return the most recent payment attempt for a booking."""
        with self._lock:
            matches = [p for p in self._payments.values() if p.booking_id == booking_id]
        return matches[-1] if matches else None

    def all_payments(self) -> dict[str, Payment]:
        with self._lock:
            return dict(self._payments)

    def statistics(self) -> PaymentStatistics:
        payments = list(self.all_payments().values())
        completed = [p for p in payments if p.status is PaymentStatus.COMPLETED]
        return PaymentStatistics(
            total_payments=len(payments),
            completed=len(completed),
            failed=sum(1 for p in payments if p.status is PaymentStatus.FAILED),
            refunded=sum(1 for p in payments if p.status is PaymentStatus.REFUNDED),
            total_revenue=sum((p.amount for p in completed), Money.zero()),
        )

    @contextmanager
    def _serialized(self, booking_id: str) -> Iterator[None]:
        """Hold the booking's lock; the entry is dropped by its last user."""
        with self._lock:
            entry = self._booking_locks.setdefault(booking_id, _BookingLock())
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._lock:
                entry.users -= 1
                if entry.users == 0:
                    del self._booking_locks[booking_id]

    @property
    def bookings_in_flight(self) -> int:
        with self._lock:
            return len(self._booking_locks)

    def _notify_failed(
        self, booking_id: str, customer_email: str, customer_phone: str, reason: str
    ) -> None:
        self._subject.notify(
            booking_id, BookingEvent.PAYMENT_FAILED, customer_email, customer_phone, reason
        )
