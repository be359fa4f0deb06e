"""Simulated Stripe card payments."""

from decimal import Decimal

from cinema.gateways.interfaces import PaymentGatewayAdapter

THREE_D_SECURE_THRESHOLD = Decimal("500.00")


class StripeAdapter(PaymentGatewayAdapter):
    gateway_name = "Stripe"
    min_amount = Decimal("0.50")
    max_amount = Decimal("999999.99")
    success_rate = 0.95
    payment_latency = 0.5
    refund_latency = 0.3

    api_version = "2024-11-20.acacia"

    def verify_payment_status(self, transaction_id: str | None) -> str:
        if transaction_id and transaction_id.startswith("pi_"):
            return "VERIFIED"
        return "INVALID"

    def requires_3d_secure(self, amount: Decimal) -> bool:
        return amount > THREE_D_SECURE_THRESHOLD

    def _new_transaction_id(self) -> str:
        return f"pi_{self._hex(24)}"

    def _new_refund_id(self) -> str:
        return f"re_{self._hex(24)}"
