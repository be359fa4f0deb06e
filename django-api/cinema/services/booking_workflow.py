"""End-to-end booking workflow.

Sequences ticket composition, pricing, booking construction, payment and
confirmation. A declined payment is compensated by cancelling the booking;
the booking id is still reported so callers can inspect what was left.
"""

import logging
import random
from collections.abc import Iterable, Sequence
from datetime import date, datetime

from cinema.conf import cinema_settings
from cinema.domain import (
    BookingBuilder,
    BookingResult,
    Customer,
    InventoryReport,
    Money,
    Movie,
    PaymentStatistics,
    Seat,
    SeatType,
    Ticket,
    TicketCatalog,
    TicketType,
)
from cinema.domain.errors import ValidationError
from cinema.domain.pricing import select_pricing_strategy
from cinema.domain.tickets import with_3d_glasses, with_snack_combo
from cinema.gateways import GatewayRegistry, default_registry
from cinema.observers import (
    BookingSubject,
    EmailNotificationObserver,
    InventoryObserver,
    SMSNotificationObserver,
)
from cinema.services.booking_service import BookingService
from cinema.services.payment_service import PaymentService
from cinema.stores import BookingStore, InMemoryBookingStore, MovieStore

logger = logging.getLogger(__name__)

BOOKING_FAILED = "Booking creation failed"
BOOKING_DATA_MISSING = "Booking data not found"
PAYMENT_FAILED = "Payment failed - booking cancelled"
BOOKING_COMPLETED = "Booking completed successfully"


class BookingWorkflow:
    """Entry point for booking, paying for and cancelling cinema tickets."""

    def __init__(
        self,
        movie_store: MovieStore,
        booking_service: BookingService,
        payment_service: PaymentService,
        catalog: TicketCatalog | None = None,
        holidays: Iterable[date] = (),
        inventory: InventoryObserver | None = None,
    ) -> None:
        self._movies = movie_store
        self.booking_service = booking_service
        self.payment_service = payment_service
        self._catalog = catalog or TicketCatalog()
        self._holidays = frozenset(holidays)
        self.inventory = inventory

    def search_movies(self) -> list[Movie]:
        return self._movies.list_movies()

    def get_movie(self, movie_id: int) -> Movie | None:
        return self._movies.get_movie(movie_id)

    def book_tickets(
        self,
        customer_name: str,
        customer_email: str,
        customer_phone: str,
        movie_id: int,
        ticket_type: TicketType | str,
        seat_count: int,
        seat_rows: Sequence[int],
        seat_numbers: Sequence[int],
        showtime: datetime,
        add_3d_glasses: bool = False,
        add_snacks: bool = False,
    ) -> str | None:
        """Build, price and record a booking.

        Returns the booking id, or None when the movie does not exist.

        Raises:
            ValidationError: If the seat coordinates do not cover every ticket
                or a booking precondition is missing.
            UnknownTicketTypeError: If the ticket type is not in the catalog.
        """
        movie = self._movies.get_movie(movie_id)
        if movie is None:
            logger.info("Booking aborted: movie %s not found", movie_id)
            return None
        if len(seat_rows) < seat_count or len(seat_numbers) < seat_count:
            raise ValidationError("seats", "A row and number is required for every seat")

        customer = Customer(customer_name, customer_email, customer_phone)
        tickets = [
            self._make_ticket(ticket_type, add_3d_glasses, add_snacks)
            for _ in range(seat_count)
        ]
        seat_type = SeatType.VIP if _is_vip(ticket_type) else SeatType.STANDARD
        seats = [
            Seat(seat_rows[i], seat_numbers[i], seat_type, available=True)
            for i in range(seat_count)
        ]

        strategy = select_pricing_strategy(showtime, self._holidays)
        builder = BookingBuilder().set_customer(customer).set_showtime(showtime)
        for ticket in tickets:
            builder.add_ticket(ticket)
        for seat in seats:
            builder.add_seat(seat)
        booking = builder.calculate_total(strategy).build()
        logger.info(
            "Priced %d ticket(s) for %s with %s pricing: %s",
            seat_count,
            movie.title,
            strategy.name,
            booking.total_price,
        )

        booking_id = self.booking_service.create_booking(
            customer_email,
            customer_phone,
            movie.title,
            seat_count,
            booking.total_price,
            booking=booking,
        )
        self.booking_service.reserve_seats(booking_id)
        return booking_id

    def process_payment(
        self,
        booking_id: str,
        amount: Money,
        method: str,
        customer_email: str,
        customer_phone: str,
    ) -> bool:
        """Pay for a booking and confirm it when the payment goes through."""
        paid = self.payment_service.process_payment(
            booking_id, amount, method, customer_email, customer_phone
        )
        if paid:
            self.booking_service.confirm_booking(booking_id)
        else:
            logger.warning("Payment for booking %s via %s failed", booking_id, method)
        return paid

    def cancel_booking(self, booking_id: str, customer_email: str, customer_phone: str) -> bool:
        """Refund any payment taken for the booking, then cancel it.

        A refund failure is logged and does not stop the cancellation.
        """
        payment = self.payment_service.get_payment_by_booking_id(booking_id)
        if payment is not None:
            refunded = self.payment_service.refund_payment(
                payment.id, customer_email, customer_phone
            )
            if not refunded:
                logger.warning(
                    "REFUND_FAILED: payment %s for booking %s was not refunded",
                    payment.id,
                    booking_id,
                )

        cancelled = self.booking_service.cancel_booking(booking_id)
        if not cancelled:
            logger.warning("Booking %s could not be cancelled: not found", booking_id)
        return cancelled

    def complete_booking_workflow(
        self,
        customer_name: str,
        customer_email: str,
        customer_phone: str,
        movie_id: int,
        ticket_type: TicketType | str,
        seat_count: int,
        showtime: datetime,
        add_3d_glasses: bool,
        add_snacks: bool,
        payment_method: str,
    ) -> BookingResult:
        """Book seats in row 1, pay the stored total and confirm or compensate."""
        seat_rows = [1] * seat_count
        seat_numbers = list(range(1, seat_count + 1))

        booking_id = self.book_tickets(
            customer_name,
            customer_email,
            customer_phone,
            movie_id,
            ticket_type,
            seat_count,
            seat_rows,
            seat_numbers,
            showtime,
            add_3d_glasses,
            add_snacks,
        )
        if booking_id is None:
            return BookingResult(False, None, BOOKING_FAILED)

        summary = self.booking_service.get_booking(booking_id)
        if summary is None:
            return BookingResult(False, booking_id, BOOKING_DATA_MISSING)

        paid = self.process_payment(
            booking_id, summary.total_amount, payment_method, customer_email, customer_phone
        )
        if not paid:
            self.cancel_booking(booking_id, customer_email, customer_phone)
            return BookingResult(False, booking_id, PAYMENT_FAILED)

        return BookingResult(True, booking_id, BOOKING_COMPLETED)

    def inventory_report(self) -> InventoryReport | None:
        return self.inventory.report() if self.inventory is not None else None

    def payment_statistics(self) -> PaymentStatistics:
        return self.payment_service.statistics()

    def _make_ticket(
        self, ticket_type: TicketType | str, add_3d_glasses: bool, add_snacks: bool
    ) -> Ticket:
        ticket = self._catalog.create(ticket_type)
        if add_3d_glasses:
            ticket = with_3d_glasses(ticket)
        if add_snacks:
            ticket = with_snack_combo(ticket)
        return ticket


def _is_vip(ticket_type: TicketType | str) -> bool:
    if isinstance(ticket_type, TicketType):
        return ticket_type is TicketType.VIP
    return ticket_type.strip().upper() == TicketType.VIP.value


def build_booking_workflow(
    movie_store: MovieStore,
    booking_store: BookingStore | None = None,
    registry: GatewayRegistry | None = None,
    holidays: Iterable[date] | None = None,
    rng: random.Random | None = None,
) -> BookingWorkflow:
    """Wire one workflow instance with its services, observers and gateways.

    Anything not passed in is taken from the `CINEMA` settings.
    """
    conf = cinema_settings()
    if registry is None:
        registry = default_registry(
            rng=rng or random.Random(conf.random_seed),
            latency_scale=conf.gateway_latency_scale,
            timeout=conf.gateway_timeout_seconds,
        )

    subject = BookingSubject()
    inventory = InventoryObserver()
    for observer in (EmailNotificationObserver(), SMSNotificationObserver(), inventory):
        subject.attach(observer)

    return BookingWorkflow(
        movie_store=movie_store,
        booking_service=BookingService(subject, booking_store or InMemoryBookingStore()),
        payment_service=PaymentService(subject, registry),
        holidays=conf.holidays if holidays is None else holidays,
        inventory=inventory,
    )
