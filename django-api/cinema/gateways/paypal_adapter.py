"""Simulated PayPal order capture."""

from decimal import Decimal

from cinema.gateways.interfaces import PaymentGatewayAdapter

BUYER_PROTECTION_LIMIT = Decimal("10000.00")


class PayPalAdapter(PaymentGatewayAdapter):
    gateway_name = "PayPal"
    min_amount = Decimal("1.00")
    max_amount = Decimal("10000.00")
    success_rate = 0.92
    # authorization, approval and capture round trips
    payment_latency = 1.0
    refund_latency = 0.4

    def verify_payment_status(self, transaction_id: str | None) -> str:
        if transaction_id and transaction_id.startswith("CAPTURE-"):
            return "COMPLETED"
        if transaction_id and transaction_id.startswith("REFUND-"):
            return "REFUNDED"
        return "NOT_FOUND"

    def is_buyer_protection_eligible(self, amount: Decimal) -> bool:
        return amount < BUYER_PROTECTION_LIMIT

    def _new_transaction_id(self) -> str:
        return f"CAPTURE-{self._hex(13).upper()}"

    def _new_refund_id(self) -> str:
        return f"REFUND-{self._hex(13).upper()}"
