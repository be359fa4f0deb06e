from cinema.stores.interfaces import BookingStore, MovieStore
from cinema.stores.memory_store import InMemoryBookingStore, InMemoryMovieStore

__all__ = ["BookingStore", "InMemoryBookingStore", "InMemoryMovieStore", "MovieStore"]
