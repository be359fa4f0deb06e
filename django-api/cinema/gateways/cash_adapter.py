"""Cash taken at the cinema counter. Always succeeds once confirmed."""

from decimal import Decimal

from cinema.gateways.interfaces import PaymentGatewayAdapter

RECEIPT_TIME_FORMAT = "%Y%m%d-%H%M%S"


class CashSystemAdapter(PaymentGatewayAdapter):
    gateway_name = "Cash"
    success_rate = 1.0
    payment_latency = 0.2
    refund_latency = 0.3

    def verify_payment_status(self, transaction_id: str | None) -> str:
        if transaction_id and transaction_id.startswith("CASH-"):
            return "VERIFIED"
        if transaction_id and transaction_id.startswith("REFUND-"):
            return "REFUNDED"
        return "INVALID"

    def calculate_change(self, amount_paid: Decimal, amount_due: Decimal) -> Decimal:
        if amount_paid < amount_due:
            raise ValueError("Insufficient payment")
        return amount_paid - amount_due

    def _receipt(self, prefix: str) -> str:
        stamp = self._clock().strftime(RECEIPT_TIME_FORMAT)
        return f"{prefix}-{stamp}-{self._hex(4).upper()}"

    def _new_transaction_id(self) -> str:
        return self._receipt("CASH")

    def _new_refund_id(self) -> str:
        return self._receipt("REFUND")
