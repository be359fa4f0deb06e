from django.apps import AppConfig


class CinemaConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cinema"

    # built once the app registry is ready; the URLconf routes every view to it
    workflow = None

    def ready(self) -> None:
        from cinema import signals  # noqa: F401
        from cinema.services import build_booking_workflow
        from cinema.stores.django_store import DjangoMovieStore

        self.workflow = build_booking_workflow(DjangoMovieStore())
