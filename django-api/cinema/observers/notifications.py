"""Customer notifications rendered from booking events.

Delivery goes through a sender callable; the default one writes the
message to the log.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from cinema.domain.events import BookingEvent
from cinema.observers.subject import BookingObserver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    recipient: str
    subject: str
    body: str


Sender = Callable[[Notification], None]


def log_sender(channel: str) -> Sender:
    def send(notification: Notification) -> None:
        logger.info(
            "[%s] to %s: %s | %s",
            channel,
            notification.recipient,
            notification.subject,
            notification.body,
        )

    return send


EMAIL_TEMPLATES: dict[BookingEvent, tuple[str, str, str]] = {
    BookingEvent.CREATED: (
        "Booking Created - Confirmation Pending",
        "Your booking has been created successfully!",
        "Please complete payment to confirm your booking.",
    ),
    BookingEvent.CONFIRMED: (
        "Booking Confirmed - Your Tickets Are Ready!",
        "Congratulations! Your booking is confirmed.",
        "Please show this email at the cinema entrance.",
    ),
    BookingEvent.PAYMENT_COMPLETED: (
        "Payment Successful",
        "Your payment has been processed successfully.",
        "",
    ),
    BookingEvent.CANCELLED: (
        "Booking Cancelled",
        "Your booking has been cancelled.",
        "Refund will be processed within 5-7 business days.",
    ),
    BookingEvent.PAYMENT_FAILED: (
        "Payment Failed - Action Required",
        "Unfortunately, your payment could not be processed.",
        "Please try again or use a different payment method.",
    ),
}


class EmailNotificationObserver(BookingObserver):
    """Emails the customer about every booking event."""

    def __init__(self, sender: Sender | None = None) -> None:
        self._send = sender or log_sender("email")
        self.sent: list[Notification] = []

    def update(self, booking_id, event, customer_email, customer_phone, details) -> None:
        notification = Notification(
            recipient=customer_email,
            subject=self._subject(event),
            body=self._body(booking_id, event, details),
        )
        self._send(notification)
        self.sent.append(notification)

    @staticmethod
    def _subject(event: BookingEvent) -> str:
        if event in EMAIL_TEMPLATES:
            return EMAIL_TEMPLATES[event][0]
        return "Booking Update"

    @staticmethod
    def _body(booking_id: str, event: BookingEvent, details: str) -> str:
        _, opening, closing = EMAIL_TEMPLATES.get(
            event, ("", "Your booking has been updated.", "")
        )
        lines = ["Dear Customer,", "", opening, f"Booking ID: {booking_id}"]
        if event not in EMAIL_TEMPLATES:
            lines.append(f"Event: {event.value}")
        lines.append(details)
        if closing:
            lines.extend(["", closing])
        return "\n".join(lines)


class SMSNotificationObserver(BookingObserver):
    """Sends a short text message about every booking event."""

    def __init__(self, sender: Sender | None = None) -> None:
        self._send = sender or log_sender("sms")
        self.sent: list[Notification] = []

    def update(self, booking_id, event, customer_email, customer_phone, details) -> None:
        notification = Notification(
            recipient=customer_phone,
            subject=event.value,
            body=self.render(booking_id, event, details),
        )
        self._send(notification)
        self.sent.append(notification)

    @staticmethod
    def render(booking_id: str, event: BookingEvent, details: str) -> str:
        short_id = booking_id[:8]
        match event:
            case BookingEvent.CREATED:
                return f"[Cinema] Booking created: {short_id}... Please complete payment."
            case BookingEvent.CONFIRMED:
                return f"[Cinema] CONFIRMED! Booking: {short_id}... See you at the cinema!"
            case BookingEvent.PAYMENT_COMPLETED:
                return f"[Cinema] Payment successful for booking: {short_id}..."
            case BookingEvent.CANCELLED:
                return f"[Cinema] Booking cancelled: {short_id}... Refund in 5-7 days."
            case BookingEvent.PAYMENT_FAILED:
                return f"[Cinema] Payment failed for: {short_id}... Please retry."
            case BookingEvent.SEATS_RESERVED:
                return f"[Cinema] Seats reserved: {details}"
            case BookingEvent.SEATS_RELEASED:
                return f"[Cinema] Seats released for: {short_id}..."
        return f"[Cinema] Update for: {short_id}... {event.value}"
