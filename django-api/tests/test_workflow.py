"""Tests for the end-to-end booking workflow.

Run with: pytest tests/test_workflow.py -v
"""

import re
from unittest import mock

import pytest

from conftest import EVENING, HOLIDAYS, MATINEE, MOVIES, SATURDAY_EVENING, fixed_rng
from cinema.domain import BookingEvent, BookingStatus, Money, PaymentStatus, SeatType
from cinema.domain.errors import UnknownTicketTypeError, ValidationError
from cinema.gateways import default_registry
from cinema.services import BookingService, BookingWorkflow, PaymentService
from cinema.services.booking_workflow import (
    BOOKING_COMPLETED,
    BOOKING_FAILED,
    PAYMENT_FAILED,
    build_booking_workflow,
)
from cinema.stores import InMemoryBookingStore, InMemoryMovieStore

NAME = "John Doe"
EMAIL = "john@example.com"
PHONE = "555-1234"


def run_workflow(workflow, movie_id=3, ticket_type="REGULAR", seat_count=2,
                 showtime=MATINEE, glasses=False, snacks=False, method="CASH"):
    return workflow.complete_booking_workflow(
        NAME, EMAIL, PHONE, movie_id, ticket_type, seat_count, showtime, glasses, snacks, method
    )


@pytest.fixture
def declining_workflow(subject, booking_store, inventory):
    """Workflow whose card gateways decline every payment."""
    return BookingWorkflow(
        movie_store=InMemoryMovieStore(MOVIES),
        booking_service=BookingService(subject, booking_store),
        payment_service=PaymentService(
            subject, default_registry(rng=fixed_rng(0.99), latency_scale=0)
        ),
        holidays=HOLIDAYS,
        inventory=inventory,
    )


class TestBookTickets:
    """Tests for BookingWorkflow.book_tickets."""

    def test_prices_with_selected_strategy(self, workflow, booking_store):
        """Two regular tickets at a matinee cost 16.00."""
        booking_id = workflow.book_tickets(
            NAME, EMAIL, PHONE, 3, "REGULAR", 2, [1, 1], [4, 5], MATINEE
        )
        booking = booking_store.get_booking(booking_id)
        assert booking.total_price == Money.of("16.00")
        assert [(s.row, s.number) for s in booking.seats] == [(1, 4), (1, 5)]
        assert booking.status is BookingStatus.PENDING

    def test_vip_with_extras_on_weekend(self, workflow, booking_store):
        """VIP plus glasses plus snacks is 35.00, times 1.15 on Saturday."""
        booking_id = workflow.book_tickets(
            NAME, EMAIL, PHONE, 2, "vip", 1, [3], [7], SATURDAY_EVENING, True, True
        )
        booking = booking_store.get_booking(booking_id)
        assert booking.total_price == Money.of("40.25")
        assert booking.seats[0].type is SeatType.VIP
        assert booking.tickets[0].description() == (
            "VIP Ticket + 3D Glasses + Snack Combo (Popcorn + Drink)"
        )

    def test_emits_created_then_reserved(self, workflow, recorder):
        workflow.book_tickets(NAME, EMAIL, PHONE, 1, "REGULAR", 3, [1, 1, 1], [1, 2, 3], EVENING)
        assert recorder.kinds() == [BookingEvent.CREATED, BookingEvent.SEATS_RESERVED]
        assert recorder.events[0][4] == "Movie: Avengers: Endgame, Seats: 3, Amount: $30.00"

    def test_unknown_movie_returns_none(self, workflow, recorder, booking_store):
        assert workflow.book_tickets(NAME, EMAIL, PHONE, 99, "REGULAR", 1, [1], [1], MATINEE) is None
        assert recorder.events == []
        assert booking_store.list_bookings() == []

    def test_too_few_seat_coordinates(self, workflow):
        with pytest.raises(ValidationError) as exc_info:
            workflow.book_tickets(NAME, EMAIL, PHONE, 1, "REGULAR", 2, [1], [1, 2], MATINEE)
        assert exc_info.value.field == "seats"

    def test_unknown_ticket_type(self, workflow, recorder):
        with pytest.raises(UnknownTicketTypeError):
            workflow.book_tickets(NAME, EMAIL, PHONE, 1, "STUDENT", 1, [1], [1], MATINEE)
        assert recorder.events == []


class TestCompleteBookingWorkflow:
    """Tests for BookingWorkflow.complete_booking_workflow."""

    def test_cash_booking_is_confirmed(self, workflow, recorder, booking_store):
        result = run_workflow(workflow)
        assert result.success is True
        assert result.message == BOOKING_COMPLETED
        assert booking_store.get_booking(result.booking_id).status is BookingStatus.CONFIRMED

        payment = workflow.payment_service.get_payment_by_booking_id(result.booking_id)
        assert payment.amount == Money.of("16.00")
        assert re.match(r"CASH-\d{8}-\d{6}-[0-9A-F]{4}$", payment.transaction_id)
        assert recorder.kinds() == [
            BookingEvent.CREATED,
            BookingEvent.SEATS_RESERVED,
            BookingEvent.PAYMENT_COMPLETED,
            BookingEvent.CONFIRMED,
        ]

    def test_seats_are_assigned_in_first_row(self, workflow, booking_store):
        result = run_workflow(workflow, seat_count=3)
        seats = booking_store.get_booking(result.booking_id).seats
        assert [(s.row, s.number) for s in seats] == [(1, 1), (1, 2), (1, 3)]

    def test_unknown_movie(self, workflow, booking_store):
        result = run_workflow(workflow, movie_id=99)
        assert (result.success, result.booking_id, result.message) == (False, None, BOOKING_FAILED)
        assert booking_store.list_bookings() == []
        assert workflow.payment_service.all_payments() == {}

    def test_declined_payment_cancels_booking(self, declining_workflow, recorder, booking_store):
        result = run_workflow(declining_workflow, method="STRIPE")
        assert result.success is False
        assert result.message == PAYMENT_FAILED
        assert result.booking_id is not None
        assert booking_store.get_booking(result.booking_id).status is BookingStatus.CANCELLED
        assert recorder.kinds() == [
            BookingEvent.CREATED,
            BookingEvent.SEATS_RESERVED,
            BookingEvent.PAYMENT_FAILED,
            BookingEvent.CANCELLED,
            BookingEvent.SEATS_RELEASED,
        ]

    def test_unknown_payment_method_cancels_booking(self, workflow, booking_store):
        result = run_workflow(workflow, method="BITCOIN")
        assert result.success is False
        assert booking_store.get_booking(result.booking_id).status is BookingStatus.CANCELLED

    def test_holiday_pricing(self, workflow):
        christmas = MATINEE.replace(month=12, day=25)
        result = run_workflow(workflow, seat_count=1, showtime=christmas)
        summary = workflow.booking_service.get_booking(result.booking_id)
        assert summary.total_amount == Money.of("12.50")


class TestCancelBooking:
    """Tests for BookingWorkflow.cancel_booking."""

    def test_cancel_refunds_payment(self, workflow, recorder, inventory):
        result = run_workflow(workflow)
        assert workflow.cancel_booking(result.booking_id, EMAIL, PHONE) is True

        payment = workflow.payment_service.get_payment_by_booking_id(result.booking_id)
        assert payment.status is PaymentStatus.REFUNDED
        assert recorder.kinds()[-3:] == [
            BookingEvent.CANCELLED,
            BookingEvent.CANCELLED,
            BookingEvent.SEATS_RELEASED,
        ]
        report = inventory.report()
        assert (report.seats_reserved, report.seats_released) == (2, 2)

    def test_payment_after_cancel_keeps_booking_cancelled(self, workflow, booking_store):
        """Paying for a cancelled booking does not resurrect it in the store."""
        booking_id = workflow.book_tickets(NAME, EMAIL, PHONE, 1, "REGULAR", 1, [1], [1], MATINEE)
        workflow.cancel_booking(booking_id, EMAIL, PHONE)
        assert workflow.process_payment(booking_id, Money.of("8.00"), "CASH", EMAIL, PHONE)

        summary = workflow.booking_service.get_booking(booking_id)
        assert summary.status is BookingStatus.CANCELLED
        assert booking_store.get_booking(booking_id).status is summary.status

    def test_cancel_without_payment(self, workflow, booking_store):
        booking_id = workflow.book_tickets(NAME, EMAIL, PHONE, 1, "REGULAR", 1, [1], [1], MATINEE)
        assert workflow.cancel_booking(booking_id, EMAIL, PHONE) is True
        assert booking_store.get_booking(booking_id).status is BookingStatus.CANCELLED

    def test_refund_failure_still_cancels(self, workflow, booking_store):
        result = run_workflow(workflow)
        with mock.patch.object(workflow.payment_service, "refund_payment", return_value=False):
            assert workflow.cancel_booking(result.booking_id, EMAIL, PHONE) is True
        assert booking_store.get_booking(result.booking_id).status is BookingStatus.CANCELLED

    def test_cancel_unknown_booking(self, workflow):
        assert workflow.cancel_booking("BK-MISSING0", EMAIL, PHONE) is False


class TestReports:
    """Tests for workflow reporting."""

    def test_statistics_and_inventory(self, workflow):
        run_workflow(workflow, seat_count=2)
        run_workflow(workflow, seat_count=1, method="STRIPE")
        stats = workflow.payment_statistics()
        assert stats.completed == 2
        assert stats.total_revenue == Money.of("24.00")
        assert workflow.inventory_report().seats_reserved == 3

    def test_built_workflow_attaches_notifiers(self):
        workflow = build_booking_workflow(
            InMemoryMovieStore(MOVIES), holidays=HOLIDAYS, rng=fixed_rng(0.0)
        )
        assert workflow.booking_service.subject.observer_count == 3
        assert workflow.inventory_report().bookings_tracked == 0
