"""Unit tests for notification and inventory observers.

Run with: pytest tests/test_observers.py -v
"""

import pytest

from cinema.domain import BookingEvent
from cinema.observers import (
    EmailNotificationObserver,
    InventoryObserver,
    Notification,
    SMSNotificationObserver,
)
from cinema.observers.inventory import extract_seat_count

BOOKING_ID = "BK-1A2B3C4D"


class TestEmailNotifications:
    """Tests for EmailNotificationObserver."""

    def test_sends_to_customer_email(self):
        delivered: list[Notification] = []
        observer = EmailNotificationObserver(sender=delivered.append)
        observer.update(BOOKING_ID, BookingEvent.CONFIRMED, "john@example.com", "555-1234", "ok")
        assert delivered == observer.sent
        assert delivered[0].recipient == "john@example.com"
        assert delivered[0].subject == "Booking Confirmed - Your Tickets Are Ready!"
        assert f"Booking ID: {BOOKING_ID}" in delivered[0].body

    def test_untemplated_event_gets_generic_update(self):
        observer = EmailNotificationObserver(sender=lambda n: None)
        observer.update(BOOKING_ID, BookingEvent.SEATS_RELEASED, "a@b.c", "1", "2 seats released")
        notification = observer.sent[0]
        assert notification.subject == "Booking Update"
        assert "Event: SEATS_RELEASED" in notification.body
        assert "2 seats released" in notification.body


class TestSMSNotifications:
    """Tests for SMSNotificationObserver."""

    @pytest.mark.parametrize(
        "event,expected",
        [
            (BookingEvent.CREATED, "[Cinema] Booking created: BK-1A2B3... Please complete payment."),
            (BookingEvent.PAYMENT_FAILED, "[Cinema] Payment failed for: BK-1A2B3... Please retry."),
            (BookingEvent.SEATS_RESERVED, "[Cinema] Seats reserved: 2 seats reserved for Up"),
        ],
    )
    def test_render(self, event, expected):
        assert SMSNotificationObserver.render(BOOKING_ID, event, "2 seats reserved for Up") == expected

    def test_sends_to_customer_phone(self):
        observer = SMSNotificationObserver(sender=lambda n: None)
        observer.update(BOOKING_ID, BookingEvent.CANCELLED, "a@b.c", "555-1234", "")
        assert observer.sent[0].recipient == "555-1234"


class TestExtractSeatCount:
    """Tests for seat count parsing."""

    @pytest.mark.parametrize(
        "details,expected",
        [
            ("3 seats reserved for Up", 3),
            ("Movie: Up, Seats: 4, Amount: $40.00", 4),
            ("1 seat released", 1),
            ("100 seats released", 100),
            ("Booking cancelled. Refund: $20.00", 1),
            ("", 1),
        ],
    )
    def test_extract(self, details, expected):
        assert extract_seat_count(details) == expected


class TestInventoryObserver:
    """Tests for InventoryObserver aggregation."""

    def test_counts_reserved_and_released(self):
        inventory = InventoryObserver()
        inventory.update("BK-1", BookingEvent.CREATED, "", "", "Movie: Up, Seats: 2, Amount: $20.00")
        inventory.update("BK-1", BookingEvent.SEATS_RESERVED, "", "", "2 seats reserved for Up")
        inventory.update("BK-1", BookingEvent.SEATS_RELEASED, "", "", "2 seats released")
        report = inventory.report()
        assert report.bookings_tracked == 1
        assert report.seats_reserved == 2
        assert report.seats_released == 2
        assert report.net_seats_occupied == 0

    def test_cancellation_alone_does_not_release(self):
        """Only SEATS_RELEASED moves the released counter."""
        inventory = InventoryObserver()
        inventory.update("BK-1", BookingEvent.CANCELLED, "", "", "Booking cancelled. Refund: $20.00")
        assert inventory.report().seats_released == 0

    def test_tracks_confirmations(self):
        inventory = InventoryObserver()
        inventory.update("BK-1", BookingEvent.CONFIRMED, "", "", "")
        inventory.update("BK-1", BookingEvent.CONFIRMED, "", "", "")
        assert inventory.confirmed_count == 1
