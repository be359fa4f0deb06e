"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
Bookings and payments are held in memory by the services; only the movie
catalog is stored here.
"""

from django.db import models


class Movie(models.Model):
    """Persistence model for movies."""

    title = models.CharField(max_length=255)
    genre = models.CharField(max_length=100)
    format = models.CharField(max_length=50, default="Standard")
    duration_minutes = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["genre"]),
        ]

    def __str__(self) -> str:
        return self.title
