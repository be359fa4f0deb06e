from django.contrib import admin

from cinema.models import Movie


@admin.register(Movie)
class MovieAdmin(admin.ModelAdmin):
    list_display = ["title", "genre", "format", "duration_minutes", "created_at"]
    search_fields = ["title", "genre"]
    list_filter = ["genre", "format"]
