"""Django ORM implementation of the MovieStore."""

from cinema import models
from cinema.domain import Movie
from cinema.stores.interfaces import MovieStore


def to_domain(movie: models.Movie) -> Movie:
    return Movie(
        id=movie.id,
        title=movie.title,
        genre=movie.genre,
        format=movie.format,
        duration_minutes=movie.duration_minutes,
    )


class DjangoMovieStore(MovieStore):
    """Database-backed movie catalog using Django ORM."""

    def list_movies(self) -> list[Movie]:
        return [to_domain(m) for m in models.Movie.objects.order_by("id")]

    def get_movie(self, movie_id: int) -> Movie | None:
        movie = models.Movie.objects.filter(pk=movie_id).first()
        return to_domain(movie) if movie is not None else None

    def find_by_genre(self, genre: str) -> list[Movie]:
        queryset = models.Movie.objects.filter(genre__iexact=genre).order_by("id")
        return [to_domain(m) for m in queryset]
