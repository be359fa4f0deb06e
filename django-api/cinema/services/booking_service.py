"""Booking lifecycle service.

Owns the created → confirmed / cancelled state of each booking and
announces every transition on the booking subject. Confirming or
cancelling twice is reported as success without a second event.
"""

import logging
import threading
from dataclasses import replace
from uuid import uuid4

from cinema.domain import Booking, BookingEvent, BookingSummary, Money
from cinema.observers import BookingSubject
from cinema.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


def generate_booking_id() -> str:
    return f"BK-{uuid4().hex[:8].upper()}"


class BookingService:
    """Service for booking lifecycle operations."""

    def __init__(self, subject: BookingSubject, store: BookingStore) -> None:
        self._subject = subject
        self._store = store
        self._bookings: dict[str, BookingSummary] = {}
        self._lock = threading.Lock()

    @property
    def subject(self) -> BookingSubject:
        return self._subject

    def create_booking(
        self,
        customer_email: str,
        customer_phone: str,
        movie_title: str,
        seat_count: int,
        total_amount: Money,
        booking: Booking | None = None,
    ) -> str:
        """Record a new booking and return its id."""
        booking_id = generate_booking_id()
        summary = BookingSummary(
            booking_id=booking_id,
            customer_email=customer_email,
            customer_phone=customer_phone,
            movie_title=movie_title,
            seat_count=seat_count,
            total_amount=Money.of(total_amount),
        )
        with self._lock:
            self._bookings[booking_id] = summary
        if booking is not None:
            # stored under the service id, the one every event refers to
            self._store.save(replace(booking, id=booking_id))

        logger.info("Booking %s created for %s", booking_id, movie_title)
        self._subject.notify(
            booking_id,
            BookingEvent.CREATED,
            customer_email,
            customer_phone,
            f"Movie: {movie_title}, Seats: {seat_count}, Amount: ${summary.total_amount}",
        )
        return booking_id

    def confirm_booking(self, booking_id: str) -> bool:
        with self._lock:
            summary = self._bookings.get(booking_id)
            if summary is None:
                return False
            if summary.confirmed:
                return True
            summary.confirmed = True
            # cancellation takes precedence in the stored record too
            self._store.update_status(booking_id, summary.status)

        logger.info("Booking %s confirmed", booking_id)
        self._subject.notify(
            booking_id,
            BookingEvent.CONFIRMED,
            summary.customer_email,
            summary.customer_phone,
            f"Movie: {summary.movie_title}, Seats: {summary.seat_count}, "
            f"Total: ${summary.total_amount} - CONFIRMED",
        )
        return True

    def cancel_booking(self, booking_id: str) -> bool:
        with self._lock:
            summary = self._bookings.get(booking_id)
            if summary is None:
                return False
            if summary.cancelled:
                return True
            summary.cancelled = True
            self._store.update_status(booking_id, summary.status)

        logger.info("Booking %s cancelled", booking_id)
        self._subject.notify(
            booking_id,
            BookingEvent.CANCELLED,
            summary.customer_email,
            summary.customer_phone,
            f"Booking cancelled. Refund: ${summary.total_amount}",
        )
        self._subject.notify(
            booking_id,
            BookingEvent.SEATS_RELEASED,
            summary.customer_email,
            summary.customer_phone,
            f"{summary.seat_count} seats released",
        )
        return True

    def reserve_seats(self, booking_id: str) -> None:
        """Announce the seat reservation; stored state is unchanged."""
        summary = self._bookings.get(booking_id)
        if summary is None:
            return
        self._subject.notify(
            booking_id,
            BookingEvent.SEATS_RESERVED,
            summary.customer_email,
            summary.customer_phone,
            f"{summary.seat_count} seats reserved for {summary.movie_title}",
        )

    def get_booking(self, booking_id: str) -> BookingSummary | None:
        return self._bookings.get(booking_id)

    def get_booking_record(self, booking_id: str) -> Booking | None:
        return self._store.get_booking(booking_id)

    def all_bookings(self) -> dict[str, BookingSummary]:
        with self._lock:
            return dict(self._bookings)
