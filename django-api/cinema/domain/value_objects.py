"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Self

CENT = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    """Price representation with validation.

    Amounts are always held quantized to cents.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        amount = Decimal(self.amount).quantize(CENT, rounding=ROUND_HALF_UP)
        if amount < 0:
            raise ValueError("Money amount cannot be negative")
        object.__setattr__(self, "amount", amount)

    @classmethod
    def of(cls, value: "Money | Decimal | int | str") -> Self:
        if isinstance(value, Money):
            return cls(value.amount)
        return cls(Decimal(str(value)))

    @classmethod
    def zero(cls) -> Self:
        return cls(Decimal("0"))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def __radd__(self, other: object) -> "Money":
        # lets sum() start from the int 0
        if other == 0:
            return self
        return NotImplemented

    def times(self, factor: Decimal) -> "Money":
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
