from cinema.domain.builder import BookingBuilder
from cinema.domain.events import BookingEvent
from cinema.domain.models import (
    Booking,
    BookingResult,
    BookingStatus,
    BookingSummary,
    Customer,
    InventoryReport,
    Movie,
    Payment,
    PaymentStatistics,
    PaymentStatus,
    Seat,
    SeatType,
)
from cinema.domain.tickets import Ticket, TicketCatalog, TicketType
from cinema.domain.value_objects import Money

__all__ = [
    "Booking",
    "BookingBuilder",
    "BookingEvent",
    "BookingResult",
    "BookingStatus",
    "BookingSummary",
    "Customer",
    "InventoryReport",
    "Money",
    "Movie",
    "Payment",
    "PaymentStatistics",
    "PaymentStatus",
    "Seat",
    "SeatType",
    "Ticket",
    "TicketCatalog",
    "TicketType",
]
