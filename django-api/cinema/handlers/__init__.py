from cinema.handlers.views import (
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

__all__ = [
    "BookingCancelView",
    "BookingDetailView",
    "BookingListView",
    "BookingPaymentView",
    "BookingWorkflowView",
    "InventoryReportView",
    "MovieDetailView",
    "MovieListView",
    "PaymentStatisticsView",
]
