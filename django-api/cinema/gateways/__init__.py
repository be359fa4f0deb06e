from cinema.gateways.cash_adapter import CashSystemAdapter
from cinema.gateways.interfaces import PaymentGatewayAdapter
from cinema.gateways.paypal_adapter import PayPalAdapter
from cinema.gateways.registry import GatewayRegistry, default_registry
from cinema.gateways.stripe_adapter import StripeAdapter

__all__ = [
    "CashSystemAdapter",
    "GatewayRegistry",
    "PayPalAdapter",
    "PaymentGatewayAdapter",
    "StripeAdapter",
    "default_registry",
]
