"""Publish/subscribe fanout of booking lifecycle events."""

import logging
import threading
from abc import ABC, abstractmethod

from cinema.domain.events import BookingEvent

logger = logging.getLogger(__name__)


class BookingObserver(ABC):
    """Receives every event emitted through a BookingSubject."""

    @abstractmethod
    def update(
        self,
        booking_id: str,
        event: BookingEvent,
        customer_email: str,
        customer_phone: str,
        details: str,
    ) -> None:
        ...


class BookingSubject:
    """Delivers events synchronously to attached observers, in attach order.

    A failing observer is logged and skipped; it never stops delivery to the
    observers after it and never reaches the emitter.
    """

    def __init__(self) -> None:
        self._observers: list[BookingObserver] = []
        self._lock = threading.Lock()

    def attach(self, observer: BookingObserver) -> None:
        with self._lock:
            if any(o is observer for o in self._observers):
                return
            self._observers.append(observer)
        logger.debug("Attached observer %s", type(observer).__name__)

    def detach(self, observer: BookingObserver) -> None:
        with self._lock:
            remaining = [o for o in self._observers if o is not observer]
            if len(remaining) == len(self._observers):
                return
            self._observers = remaining
        logger.debug("Detached observer %s", type(observer).__name__)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def notify(
        self,
        booking_id: str,
        event: BookingEvent,
        customer_email: str,
        customer_phone: str,
        details: str,
    ) -> None:
        with self._lock:
            observers = tuple(self._observers)
        logger.debug(
            "Notifying %d observers about %s for %s", len(observers), event.value, booking_id
        )
        for observer in observers:
            try:
                observer.update(booking_id, event, customer_email, customer_phone, details)
            except Exception:
                logger.exception(
                    "Observer %s failed on %s for booking %s",
                    type(observer).__name__,
                    event.value,
                    booking_id,
                )
