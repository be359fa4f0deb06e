"""Seat inventory tracking driven by booking events."""

import logging
import re
import threading

from cinema.domain.events import BookingEvent
from cinema.domain.models import InventoryReport
from cinema.observers.subject import BookingObserver

logger = logging.getLogger(__name__)

SEAT_COUNT_PATTERN = re.compile(r"\b(\d+)\s+seats?\b|Seats:\s*(\d+)\b")


def extract_seat_count(details: str) -> int:
    """Pull the seat count out of event details, defaulting to one seat."""
    match = SEAT_COUNT_PATTERN.search(details or "")
    if match is None:
        return 1
    count = int(match.group(1) or match.group(2))
    return count if count > 0 else 1


class InventoryObserver(BookingObserver):
    """Aggregates reserved and released seat counts. Read-only towards services."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._booking_seats: dict[str, int] = {}
        self._confirmed: set[str] = set()
        self.total_seats_reserved = 0
        self.total_seats_released = 0

    def update(self, booking_id, event, customer_email, customer_phone, details) -> None:
        with self._lock:
            if event is BookingEvent.CREATED:
                self._booking_seats[booking_id] = extract_seat_count(details)
            elif event is BookingEvent.SEATS_RESERVED:
                self.total_seats_reserved += extract_seat_count(details)
            elif event is BookingEvent.SEATS_RELEASED:
                self.total_seats_released += extract_seat_count(details)
            elif event is BookingEvent.CONFIRMED:
                self._confirmed.add(booking_id)
            else:
                logger.debug("Inventory ignores %s for %s", event.value, booking_id)
                return
        logger.info(
            "Inventory after %s for %s: reserved=%d released=%d",
            event.value,
            booking_id,
            self.total_seats_reserved,
            self.total_seats_released,
        )

    @property
    def booking_count(self) -> int:
        return len(self._booking_seats)

    @property
    def confirmed_count(self) -> int:
        return len(self._confirmed)

    def report(self) -> InventoryReport:
        with self._lock:
            return InventoryReport(
                bookings_tracked=len(self._booking_seats),
                seats_reserved=self.total_seats_reserved,
                seats_released=self.total_seats_released,
            )
