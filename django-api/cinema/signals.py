"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from cinema.models import Movie

MOVIE_LIST_CACHE_KEY = "movies:list"


def movie_detail_cache_key(movie_id: int) -> str:
    return f"movies:{movie_id}"


@receiver([post_save, post_delete], sender=Movie)
def invalidate_movie_cache(sender, instance, **kwargs):
    """Invalidate caches when a movie is saved or deleted."""
    cache.delete_many([MOVIE_LIST_CACHE_KEY, movie_detail_cache_key(instance.pk)])
