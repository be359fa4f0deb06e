"""Time-dependent pricing strategies.

Every strategy multiplies the ticket price sum by a single factor.
`select_pricing_strategy` picks exactly one per booking: holiday first,
then weekend, then matinee, then the standard rate.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time
from decimal import Decimal

from cinema.domain.tickets import Ticket
from cinema.domain.value_objects import Money

MATINEE_CUTOFF = time(17, 0)
WEEKEND_DAYS = frozenset({5, 6})


class PricingStrategy(ABC):
    """Maps a ticket list and a showtime to a total price."""

    name: str = ""
    factor: Decimal = Decimal("1.00")

    def total(self, tickets: Sequence[Ticket], showtime: datetime) -> Money:
        base = sum((ticket.price() for ticket in tickets), Money.zero())
        return base.times(self.factor)

    @abstractmethod
    def applies_to(self, showtime: datetime) -> bool:
        """Return True when this strategy's rule matches the showtime."""
        ...


class HolidayPricingStrategy(PricingStrategy):
    name = "holiday"
    factor = Decimal("1.25")

    def __init__(self, holidays: Iterable[date] | None = None) -> None:
        self._holidays = frozenset(holidays or ())

    def applies_to(self, showtime: datetime) -> bool:
        return showtime.date() in self._holidays


class WeekendPricingStrategy(PricingStrategy):
    name = "weekend"
    factor = Decimal("1.15")

    def applies_to(self, showtime: datetime) -> bool:
        return showtime.weekday() in WEEKEND_DAYS


class MatineePricingStrategy(PricingStrategy):
    name = "matinee"
    factor = Decimal("0.80")

    def applies_to(self, showtime: datetime) -> bool:
        return showtime.time() < MATINEE_CUTOFF


class StandardPricingStrategy(PricingStrategy):
    name = "standard"

    def applies_to(self, showtime: datetime) -> bool:
        return True


WEEKEND_PRICING = WeekendPricingStrategy()
MATINEE_PRICING = MatineePricingStrategy()
STANDARD_PRICING = StandardPricingStrategy()


def select_pricing_strategy(
    showtime: datetime, holidays: Iterable[date] | None = None
) -> PricingStrategy:
    """Return the single strategy that prices a booking at `showtime`."""
    chain: tuple[PricingStrategy, ...] = (
        HolidayPricingStrategy(holidays),
        WEEKEND_PRICING,
        MATINEE_PRICING,
    )
    for strategy in chain:
        if strategy.applies_to(showtime):
            return strategy
    return STANDARD_PRICING
