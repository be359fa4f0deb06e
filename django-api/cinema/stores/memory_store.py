"""In-process store implementations, lost on restart."""

import dataclasses
import threading
from collections.abc import Iterable

from cinema.domain import Booking, BookingStatus, Movie
from cinema.stores.interfaces import BookingStore, MovieStore


class InMemoryMovieStore(MovieStore):
    def __init__(self, movies: Iterable[Movie] = ()) -> None:
        self._movies = {movie.id: movie for movie in movies}

    def add(self, movie: Movie) -> None:
        self._movies[movie.id] = movie

    def list_movies(self) -> list[Movie]:
        return [self._movies[key] for key in sorted(self._movies)]

    def get_movie(self, movie_id: int) -> Movie | None:
        return self._movies.get(movie_id)

    def find_by_genre(self, genre: str) -> list[Movie]:
        return [m for m in self.list_movies() if m.genre.lower() == genre.lower()]


class InMemoryBookingStore(BookingStore):
    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}
        self._lock = threading.Lock()

    def save(self, booking: Booking) -> None:
        with self._lock:
            self._bookings[booking.id] = booking

    def get_booking(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def list_bookings(self) -> list[Booking]:
        with self._lock:
            bookings = list(self._bookings.values())
        return sorted(bookings, key=lambda b: b.created_at)

    def find_by_customer_email(self, email: str) -> list[Booking]:
        wanted = email.lower()
        return [
            b
            for b in self.list_bookings()
            if b.customer.email is not None and b.customer.email.lower() == wanted
        ]

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking | None:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            updated = dataclasses.replace(booking, status=status)
            self._bookings[booking_id] = updated
            return updated

    def delete(self, booking_id: str) -> None:
        with self._lock:
            self._bookings.pop(booking_id, None)
