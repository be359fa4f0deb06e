"""Unit tests for tickets, add-ons and the ticket catalog.

Run with: pytest tests/test_tickets.py -v
"""

import dataclasses

import pytest

from cinema.domain import Money, TicketCatalog, TicketType
from cinema.domain.errors import ErrorCode, UnknownTicketTypeError
from cinema.domain.tickets import (
    BaseTicket,
    regular_ticket,
    vip_ticket,
    with_3d_glasses,
    with_snack_combo,
)


class TestBaseTickets:
    """Tests for the fixed-price catalog tickets."""

    def test_regular_ticket(self):
        """Regular tickets cost 10.00."""
        ticket = regular_ticket()
        assert ticket.price() == Money.of("10.00")
        assert ticket.description() == "Regular Ticket"

    def test_vip_ticket(self):
        """VIP tickets cost 20.00."""
        ticket = vip_ticket()
        assert ticket.price() == Money.of("20.00")
        assert ticket.description() == "VIP Ticket"

    def test_tickets_are_immutable(self):
        """A ticket cannot be repriced after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            regular_ticket().base_price = Money.of("1.00")


class TestDecoration:
    """Tests for stacking add-ons onto a ticket."""

    def test_3d_glasses_add_five(self):
        """3D glasses add 5.00 and a description suffix."""
        ticket = with_3d_glasses(regular_ticket())
        assert ticket.price() == Money.of("15.00")
        assert ticket.description() == "Regular Ticket + 3D Glasses"

    def test_snack_combo_adds_ten(self):
        """The snack combo adds 10.00."""
        ticket = with_snack_combo(vip_ticket())
        assert ticket.price() == Money.of("30.00")
        assert ticket.description() == "VIP Ticket + Snack Combo (Popcorn + Drink)"

    def test_price_is_independent_of_wrap_order(self):
        """Regular + snacks + glasses costs 25.00 in either order."""
        snacks_outside = with_snack_combo(with_3d_glasses(regular_ticket()))
        glasses_outside = with_3d_glasses(with_snack_combo(regular_ticket()))
        assert snacks_outside.price() == Money.of("25.00")
        assert glasses_outside.price() == Money.of("25.00")

    def test_description_follows_wrap_order(self):
        """The outermost add-on is described last."""
        ticket = with_snack_combo(with_3d_glasses(regular_ticket()))
        assert ticket.description() == (
            "Regular Ticket + 3D Glasses + Snack Combo (Popcorn + Drink)"
        )

    def test_decoration_leaves_inner_ticket_untouched(self):
        """Wrapping composes a new ticket instead of changing the inner one."""
        inner = regular_ticket()
        with_3d_glasses(inner)
        assert inner.price() == Money.of("10.00")

    def test_same_add_on_can_stack(self):
        """An add-on may be applied more than once."""
        ticket = with_3d_glasses(with_3d_glasses(regular_ticket()))
        assert ticket.price() == Money.of("20.00")


class TestTicketCatalog:
    """Tests for TicketCatalog."""

    def test_create_by_enum(self):
        """The catalog builds the variant registered for a type."""
        assert TicketCatalog().create(TicketType.VIP).price() == Money.of("20.00")

    def test_create_by_name_ignores_case(self):
        """Ticket type names are matched case-insensitively."""
        assert TicketCatalog().create(" regular ").description() == "Regular Ticket"

    def test_create_returns_fresh_ticket(self):
        """Each call returns its own ticket value."""
        catalog = TicketCatalog()
        assert catalog.create("VIP") is not catalog.create("VIP")

    def test_unknown_name_raises(self):
        """An unknown tag raises UnknownTicketTypeError."""
        with pytest.raises(UnknownTicketTypeError) as exc_info:
            TicketCatalog().create("STUDENT")
        assert exc_info.value.code is ErrorCode.UNKNOWN_TICKET_TYPE

    def test_register_replaces_variant(self):
        """A registered factory is used for its type."""
        catalog = TicketCatalog()
        catalog.register(
            TicketType.REGULAR,
            lambda: BaseTicket(TicketType.REGULAR, Money.of("7.50"), "Discount Ticket"),
        )
        assert catalog.create(TicketType.REGULAR).price() == Money.of("7.50")
        assert catalog.ticket_types() == [TicketType.REGULAR, TicketType.VIP]
