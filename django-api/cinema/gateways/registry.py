"""Lookup of payment gateways by method name."""

import random
import time
from collections.abc import Callable

from cinema.domain.errors import GatewayNotFoundError
from cinema.gateways.cash_adapter import CashSystemAdapter
from cinema.gateways.interfaces import PaymentGatewayAdapter
from cinema.gateways.paypal_adapter import PayPalAdapter
from cinema.gateways.stripe_adapter import StripeAdapter


class GatewayRegistry:
    """Maps an uppercase payment method name to its adapter."""

    def __init__(self) -> None:
        self._adapters: dict[str, PaymentGatewayAdapter] = {}

    def register(self, method: str, adapter: PaymentGatewayAdapter) -> None:
        self._adapters[method.upper()] = adapter

    def get(self, method: str) -> PaymentGatewayAdapter | None:
        return self._adapters.get(method.upper())

    def resolve(self, method: str) -> PaymentGatewayAdapter:
        """Return the adapter for `method`.

        Raises:
            GatewayNotFoundError: If no adapter is registered for it.
        """
        adapter = self.get(method)
        if adapter is None:
            raise GatewayNotFoundError(method)
        return adapter

    def methods(self) -> list[str]:
        return sorted(self._adapters)


def default_registry(
    rng: random.Random | None = None,
    latency_scale: float = 1.0,
    timeout: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> GatewayRegistry:
    """Registry with the Stripe, PayPal and cash backends sharing one RNG."""
    rng = rng or random.Random()
    registry = GatewayRegistry()
    for method, adapter_class in (
        ("STRIPE", StripeAdapter),
        ("PAYPAL", PayPalAdapter),
        ("CASH", CashSystemAdapter),
    ):
        registry.register(
            method,
            adapter_class(rng=rng, latency_scale=latency_scale, timeout=timeout, sleep=sleep),
        )
    return registry
