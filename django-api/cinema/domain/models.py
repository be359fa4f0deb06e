"""Domain models representing booking and payment state.

These are pure domain objects with no API input rules.
Django ORM models are in cinema/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from cinema.domain.errors import ValidationError
from cinema.domain.tickets import Ticket
from cinema.domain.value_objects import Money


class SeatType(Enum):
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"
    VIP = "VIP"


class BookingStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class PaymentStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Movie:
    """Domain representation of a Movie."""

    id: int
    title: str
    genre: str
    format: str
    duration_minutes: int


@dataclass(frozen=True)
class Customer:
    """Contact details of the person making a booking."""

    name: str
    email: str
    phone: str


@dataclass
class Seat:
    """A physical seat; `available` belongs to whichever booking holds it."""

    row: int
    number: int
    type: SeatType = SeatType.STANDARD
    available: bool = True

    def __post_init__(self) -> None:
        if self.row <= 0 or self.number <= 0:
            raise ValidationError("seat", "Row and number must be positive")


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking.

    Only `status` ever changes after construction, and only through the
    booking store on behalf of BookingService.
    """

    id: str
    customer: Customer
    tickets: tuple[Ticket, ...]
    seats: tuple[Seat, ...]
    showtime: datetime
    total_price: Money
    status: BookingStatus
    created_at: datetime


@dataclass
class BookingSummary:
    """Minimal per-booking state kept by BookingService."""

    booking_id: str
    customer_email: str
    customer_phone: str
    movie_title: str
    seat_count: int
    total_amount: Money
    confirmed: bool = False
    cancelled: bool = False

    @property
    def status(self) -> BookingStatus:
        if self.cancelled:
            return BookingStatus.CANCELLED
        if self.confirmed:
            return BookingStatus.CONFIRMED
        return BookingStatus.PENDING


@dataclass
class Payment:
    """A single payment attempt against a booking."""

    booking_id: str
    amount: Money
    method: str
    id: str = field(default_factory=lambda: str(uuid4()))
    status: PaymentStatus = PaymentStatus.PENDING
    transaction_id: str | None = None
    refund_id: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class BookingResult:
    """Outcome of the end-to-end booking workflow."""

    success: bool
    booking_id: str | None
    message: str


@dataclass(frozen=True)
class PaymentStatistics:
    total_payments: int
    completed: int
    failed: int
    refunded: int
    total_revenue: Money


@dataclass(frozen=True)
class InventoryReport:
    bookings_tracked: int
    seats_reserved: int
    seats_released: int

    @property
    def net_seats_occupied(self) -> int:
        return self.seats_reserved - self.seats_released
