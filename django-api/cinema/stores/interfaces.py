"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from cinema.domain import Booking, BookingStatus, Movie


class MovieStore(ABC):
    """Interface for movie catalog lookups."""

    @abstractmethod
    def list_movies(self) -> list[Movie]:
        """Return all movies ordered by id."""
        ...

    @abstractmethod
    def get_movie(self, movie_id: int) -> Movie | None:
        """Return a movie by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_genre(self, genre: str) -> list[Movie]:
        """Return movies of a genre, compared case-insensitively."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """Insert or replace a booking keyed by its id."""
        ...

    @abstractmethod
    def get_booking(self, booking_id: str) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """Return all bookings ordered by created_at ascending."""
        ...

    @abstractmethod
    def find_by_customer_email(self, email: str) -> list[Booking]:
        """Return bookings whose customer email matches, ignoring case."""
        ...

    @abstractmethod
    def update_status(self, booking_id: str, status: BookingStatus) -> Booking | None:
        """Set the status of a stored booking and return the new record."""
        ...

    @abstractmethod
    def delete(self, booking_id: str) -> None:
        """Remove a booking if present."""
        ...
