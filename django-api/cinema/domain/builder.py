"""Step-by-step construction of a validated Booking."""

from datetime import datetime
from typing import Self
from uuid import uuid4

from cinema.domain.errors import ValidationError
from cinema.domain.models import Booking, BookingStatus, Customer, Seat
from cinema.domain.pricing import PricingStrategy
from cinema.domain.tickets import Ticket
from cinema.domain.value_objects import Money


class BookingBuilder:
    """Accumulates booking parts, prices them and builds an immutable Booking.

    A builder is meant to be used once and by a single caller.
    """

    def __init__(self) -> None:
        self._customer: Customer | None = None
        self._showtime: datetime | None = None
        self._tickets: list[Ticket] = []
        self._seats: list[Seat] = []
        self._total_price: Money | None = None
        self._status = BookingStatus.PENDING

    def set_customer(self, customer: Customer | None) -> Self:
        self._customer = customer
        return self

    def set_showtime(self, showtime: datetime | None) -> Self:
        self._showtime = showtime
        return self

    def add_ticket(self, ticket: Ticket | None) -> Self:
        if ticket is not None:
            self._tickets.append(ticket)
        return self

    def add_seat(self, seat: Seat | None) -> Self:
        if seat is not None:
            self._seats.append(seat)
        return self

    def set_status(self, status: BookingStatus) -> Self:
        self._status = status
        return self

    def calculate_total(self, strategy: PricingStrategy | None) -> Self:
        """Price the collected tickets with `strategy`.

        Raises:
            ValueError: If no strategy is given.
            ValidationError: If there are no tickets or no showtime yet.
        """
        if strategy is None:
            raise ValueError("PricingStrategy cannot be None")
        if not self._tickets:
            raise ValidationError("tickets", "Cannot calculate price without tickets")
        if self._showtime is None:
            raise ValidationError(
                "showtime", "Showtime must be set before calculating price"
            )
        self._total_price = strategy.total(self._tickets, self._showtime)
        return self

    @property
    def total_calculated(self) -> bool:
        return self._total_price is not None

    def build(self) -> Booking:
        """Validate the collected parts and return the Booking.

        Raises:
            ValidationError: Naming the first missing or inconsistent field.
        """
        booking_id = str(uuid4())
        created_at = datetime.now()

        if self._customer is None:
            raise ValidationError("customer", "Customer must be provided")
        if self._showtime is None:
            raise ValidationError("showtime", "Showtime must be provided")
        if not self._tickets:
            raise ValidationError("tickets", "At least one ticket must be added")
        if not self._seats:
            raise ValidationError("seats", "At least one seat must be selected")
        if len(self._seats) < len(self._tickets):
            raise ValidationError("seats_for_tickets", "Not enough seats for all tickets")
        if self._total_price is None:
            raise ValidationError(
                "total_price", "Total price must be calculated via PricingStrategy"
            )

        return Booking(
            id=booking_id,
            customer=self._customer,
            tickets=tuple(self._tickets),
            seats=tuple(self._seats),
            showtime=self._showtime,
            total_price=self._total_price,
            status=self._status,
            created_at=created_at,
        )
