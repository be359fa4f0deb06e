from cinema.observers.inventory import InventoryObserver
from cinema.observers.notifications import (
    EmailNotificationObserver,
    Notification,
    SMSNotificationObserver,
)
from cinema.observers.subject import BookingObserver, BookingSubject

__all__ = [
    "BookingObserver",
    "BookingSubject",
    "EmailNotificationObserver",
    "InventoryObserver",
    "Notification",
    "SMSNotificationObserver",
]
