"""Pytest configuration and shared fixtures."""

import random
from datetime import date, datetime

import pytest
from rest_framework.test import APIClient, APIRequestFactory

from cinema.domain import BookingEvent, Movie
from cinema.gateways import default_registry
from cinema.observers import BookingObserver, BookingSubject, InventoryObserver
from cinema.services import BookingService, BookingWorkflow, PaymentService
from cinema.stores import InMemoryBookingStore, InMemoryMovieStore

MOVIES = [
    Movie(1, "Avengers: Endgame", "Action", "IMAX", 181),
    Movie(2, "Avatar: The Way of Water", "Sci-Fi", "3D", 192),
    Movie(3, "The Batman", "Action", "Standard", 176),
]

# Thursday afternoon, Thursday evening, Saturday evening
MATINEE = datetime(2025, 11, 20, 14, 30)
EVENING = datetime(2025, 11, 20, 19, 0)
SATURDAY_EVENING = datetime(2025, 11, 22, 19, 0)
HOLIDAYS = frozenset({date(2025, 12, 25)})


class FixedRandom(random.Random):
    """Random source whose `random()` always returns `outcome`."""

    outcome = 0.0

    def random(self) -> float:
        return self.outcome


def fixed_rng(outcome: float) -> FixedRandom:
    rng = FixedRandom(1234)
    rng.outcome = outcome
    return rng


class RecordingObserver(BookingObserver):
    def __init__(self) -> None:
        self.events: list[tuple[str, BookingEvent, str, str, str]] = []

    def update(self, booking_id, event, customer_email, customer_phone, details) -> None:
        self.events.append((booking_id, event, customer_email, customer_phone, details))

    def kinds(self) -> list[BookingEvent]:
        return [event for _, event, *_ in self.events]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def request_factory() -> APIRequestFactory:
    return APIRequestFactory()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def subject(recorder: RecordingObserver) -> BookingSubject:
    subject = BookingSubject()
    subject.attach(recorder)
    return subject


@pytest.fixture
def rng() -> FixedRandom:
    """Approves every simulated card payment."""
    return fixed_rng(0.0)


@pytest.fixture
def registry(rng: FixedRandom):
    return default_registry(rng=rng, latency_scale=0)


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def booking_service(subject: BookingSubject, booking_store: InMemoryBookingStore) -> BookingService:
    return BookingService(subject, booking_store)


@pytest.fixture
def payment_service(subject: BookingSubject, registry) -> PaymentService:
    return PaymentService(subject, registry)


@pytest.fixture
def inventory(subject: BookingSubject) -> InventoryObserver:
    observer = InventoryObserver()
    subject.attach(observer)
    return observer


@pytest.fixture
def workflow(
    booking_service: BookingService,
    payment_service: PaymentService,
    inventory: InventoryObserver,
) -> BookingWorkflow:
    return BookingWorkflow(
        movie_store=InMemoryMovieStore(MOVIES),
        booking_service=booking_service,
        payment_service=payment_service,
        holidays=HOLIDAYS,
        inventory=inventory,
    )
