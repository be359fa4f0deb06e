from django.apps import apps
from django.urls import path

from cinema.handlers import (
    BookingCancelView,
    BookingDetailView,
    BookingListView,
    BookingPaymentView,
    BookingWorkflowView,
    InventoryReportView,
    MovieDetailView,
    MovieListView,
    PaymentStatisticsView,
)
from cinema.services import BookingWorkflow


def build_urlpatterns(workflow: BookingWorkflow) -> list:
    """Route every handler to the same workflow instance."""
    views = {"workflow": workflow}
    return [
        path("movies", MovieListView.as_view(**views), name="movie-list"),
        path("movies/<int:movie_id>", MovieDetailView.as_view(**views), name="movie-detail"),
        path("bookings", BookingListView.as_view(**views), name="booking-list"),
        path(
            "bookings/workflow",
            BookingWorkflowView.as_view(**views),
            name="booking-workflow",
        ),
        path(
            "bookings/<str:booking_id>",
            BookingDetailView.as_view(**views),
            name="booking-detail",
        ),
        path(
            "bookings/<str:booking_id>/payments",
            BookingPaymentView.as_view(**views),
            name="booking-payment",
        ),
        path(
            "bookings/<str:booking_id>/cancel",
            BookingCancelView.as_view(**views),
            name="booking-cancel",
        ),
        path(
            "payments/statistics",
            PaymentStatisticsView.as_view(**views),
            name="payment-statistics",
        ),
        path(
            "inventory/report",
            InventoryReportView.as_view(**views),
            name="inventory-report",
        ),
    ]


urlpatterns = build_urlpatterns(apps.get_app_config("cinema").workflow)
