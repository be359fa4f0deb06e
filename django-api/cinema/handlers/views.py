"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call the booking workflow for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

Every view gets its workflow through `as_view(workflow=...)`.
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from cinema.conf import cinema_settings
from cinema.domain.errors import (
    BookingNotFoundError,
    DomainError,
    ErrorCode,
    MovieNotFoundError,
)
from cinema.handlers.serializers import (
    BookingResultSerializer,
    BookingSummarySerializer,
    BookTicketsSerializer,
    CancelRequestSerializer,
    InventoryReportSerializer,
    MovieSerializer,
    PaymentRequestSerializer,
    PaymentStatisticsSerializer,
    WorkflowRequestSerializer,
)
from cinema.services import BookingWorkflow
from cinema.signals import MOVIE_LIST_CACHE_KEY, movie_detail_cache_key

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN_TICKET_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MOVIE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAYMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def invalid_request(errors) -> Response:
    return Response(
        {
            "code": ErrorCode.VALIDATION_ERROR.value,
            "message": "Invalid request",
            "fields": errors,
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class WorkflowView(APIView):
    """Base view holding the injected booking workflow."""

    workflow: BookingWorkflow | None = None


class MovieListView(WorkflowView):
    """Handler for GET /api/movies"""

    def get(self, request: Request) -> Response:
        data = cache.get(MOVIE_LIST_CACHE_KEY)
        if data is None:
            data = MovieSerializer(self.workflow.search_movies(), many=True).data
            cache.set(MOVIE_LIST_CACHE_KEY, data, cinema_settings().movies_cache_timeout)
        return Response(data)


class MovieDetailView(WorkflowView):
    """Handler for GET /api/movies/{movie_id}"""

    def get(self, request: Request, movie_id: int) -> Response:
        key = movie_detail_cache_key(movie_id)
        data = cache.get(key)
        if data is None:
            movie = self.workflow.get_movie(movie_id)
            if movie is None:
                return error_response(MovieNotFoundError(movie_id))
            data = MovieSerializer(movie).data
            cache.set(key, data, cinema_settings().movies_cache_timeout)
        return Response(data)


class BookingListView(WorkflowView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = BookTicketsSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request(serializer.errors)
        data = serializer.validated_data

        try:
            booking_id = self.workflow.book_tickets(
                data["customer_name"],
                data["customer_email"],
                data["customer_phone"],
                data["movie_id"],
                data["ticket_type"],
                data["seat_count"],
                data["seat_rows"],
                data["seat_numbers"],
                data["showtime"],
                data["add_3d_glasses"],
                data["add_snacks"],
            )
        except DomainError as exc:
            return error_response(exc)
        if booking_id is None:
            return error_response(MovieNotFoundError(data["movie_id"]))
        return Response({"booking_id": booking_id}, status=status.HTTP_201_CREATED)


class BookingDetailView(WorkflowView):
    """Handler for GET /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        summary = self.workflow.booking_service.get_booking(booking_id)
        if summary is None:
            return error_response(BookingNotFoundError(booking_id))
        return Response(BookingSummarySerializer(summary).data)


class BookingPaymentView(WorkflowView):
    """Handler for POST /api/bookings/{booking_id}/payments"""

    def post(self, request: Request, booking_id: str) -> Response:
        summary = self.workflow.booking_service.get_booking(booking_id)
        if summary is None:
            return error_response(BookingNotFoundError(booking_id))
        serializer = PaymentRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request(serializer.errors)
        data = serializer.validated_data

        success = self.workflow.process_payment(
            booking_id,
            data.get("amount", summary.total_amount.amount),
            data["payment_method"],
            data.get("customer_email", summary.customer_email),
            data.get("customer_phone", summary.customer_phone),
        )
        return Response({"booking_id": booking_id, "success": success})


class BookingCancelView(WorkflowView):
    """Handler for POST /api/bookings/{booking_id}/cancel"""

    def post(self, request: Request, booking_id: str) -> Response:
        summary = self.workflow.booking_service.get_booking(booking_id)
        if summary is None:
            return error_response(BookingNotFoundError(booking_id))
        serializer = CancelRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request(serializer.errors)
        data = serializer.validated_data

        success = self.workflow.cancel_booking(
            booking_id,
            data.get("customer_email", summary.customer_email),
            data.get("customer_phone", summary.customer_phone),
        )
        return Response({"booking_id": booking_id, "success": success})


class BookingWorkflowView(WorkflowView):
    """Handler for POST /api/bookings/workflow"""

    def post(self, request: Request) -> Response:
        serializer = WorkflowRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request(serializer.errors)
        data = serializer.validated_data

        try:
            result = self.workflow.complete_booking_workflow(
                data["customer_name"],
                data["customer_email"],
                data["customer_phone"],
                data["movie_id"],
                data["ticket_type"],
                data["seat_count"],
                data["showtime"],
                data["add_3d_glasses"],
                data["add_snacks"],
                data["payment_method"],
            )
        except DomainError as exc:
            return error_response(exc)

        if result.success:
            code = status.HTTP_201_CREATED
        elif result.booking_id is None:
            code = status.HTTP_404_NOT_FOUND
        else:
            code = status.HTTP_402_PAYMENT_REQUIRED
        return Response(BookingResultSerializer(result).data, status=code)


class PaymentStatisticsView(WorkflowView):
    """Handler for GET /api/payments/statistics"""

    def get(self, request: Request) -> Response:
        stats = self.workflow.payment_statistics()
        return Response(PaymentStatisticsSerializer(stats).data)


class InventoryReportView(WorkflowView):
    """Handler for GET /api/inventory/report"""

    def get(self, request: Request) -> Response:
        report = self.workflow.inventory_report()
        if report is None:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(InventoryReportSerializer(report).data)
