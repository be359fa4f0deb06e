"""Tickets, add-on decoration and the ticket catalog.

A ticket only knows its price and description. Add-ons wrap an existing
ticket instead of subclassing it, so any number of them can be stacked.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from cinema.domain.errors import UnknownTicketTypeError
from cinema.domain.value_objects import Money


class TicketType(Enum):
    REGULAR = "REGULAR"
    VIP = "VIP"


class Ticket(ABC):
    """Priced, describable admission unit."""

    @abstractmethod
    def price(self) -> Money:
        ...

    @abstractmethod
    def description(self) -> str:
        ...


@dataclass(frozen=True)
class BaseTicket(Ticket):
    """A catalog ticket with a fixed price."""

    ticket_type: TicketType
    base_price: Money
    label: str

    def price(self) -> Money:
        return self.base_price

    def description(self) -> str:
        return self.label


@dataclass(frozen=True)
class DecoratedTicket(Ticket):
    """Wraps another ticket and adds a fixed surcharge and label."""

    inner: Ticket
    surcharge: Money
    label: str

    def price(self) -> Money:
        return self.inner.price() + self.surcharge

    def description(self) -> str:
        return f"{self.inner.description()} + {self.label}"


REGULAR_PRICE = Money.of("10.00")
VIP_PRICE = Money.of("20.00")
GLASSES_3D_PRICE = Money.of("5.00")
SNACK_COMBO_PRICE = Money.of("10.00")


def regular_ticket() -> BaseTicket:
    return BaseTicket(TicketType.REGULAR, REGULAR_PRICE, "Regular Ticket")


def vip_ticket() -> BaseTicket:
    return BaseTicket(TicketType.VIP, VIP_PRICE, "VIP Ticket")


def with_3d_glasses(ticket: Ticket) -> DecoratedTicket:
    return DecoratedTicket(ticket, GLASSES_3D_PRICE, "3D Glasses")


def with_snack_combo(ticket: Ticket) -> DecoratedTicket:
    return DecoratedTicket(ticket, SNACK_COMBO_PRICE, "Snack Combo (Popcorn + Drink)")


class TicketCatalog:
    """Registry of ticket constructors keyed by ticket type."""

    def __init__(self) -> None:
        self._factories: dict[TicketType, Callable[[], Ticket]] = {
            TicketType.REGULAR: regular_ticket,
            TicketType.VIP: vip_ticket,
        }

    def register(self, ticket_type: TicketType, factory: Callable[[], Ticket]) -> None:
        self._factories[ticket_type] = factory

    def create(self, ticket_type: TicketType | str) -> Ticket:
        """Return a fresh ticket for a type or its case-insensitive name.

        Raises:
            UnknownTicketTypeError: If no variant is registered for the tag.
        """
        if isinstance(ticket_type, str):
            try:
                ticket_type = TicketType[ticket_type.strip().upper()]
            except KeyError:
                raise UnknownTicketTypeError(ticket_type) from None
        factory = self._factories.get(ticket_type)
        if factory is None:
            raise UnknownTicketTypeError(str(ticket_type))
        return factory()

    def ticket_types(self) -> list[TicketType]:
        return list(self._factories)
