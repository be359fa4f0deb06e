"""Vocabulary of the booking event bus."""

from enum import Enum


class BookingEvent(Enum):
    CREATED = "CREATED"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    PAYMENT_COMPLETED = "PAYMENT_COMPLETED"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    SEATS_RESERVED = "SEATS_RESERVED"
    SEATS_RELEASED = "SEATS_RELEASED"
