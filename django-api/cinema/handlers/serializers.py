"""Serializers for request parsing and for rendering domain models."""

from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from cinema.domain import TicketType

MONEY = {"max_digits": 12, "decimal_places": 2}


class MovieSerializer(serializers.Serializer):
    """Serializer for Movie domain model."""

    id = serializers.IntegerField()
    title = serializers.CharField()
    genre = serializers.CharField()
    format = serializers.CharField()
    duration_minutes = serializers.IntegerField()


class BookingSummarySerializer(serializers.Serializer):
    """Serializer for BookingSummary domain model."""

    booking_id = serializers.CharField()
    customer_email = serializers.EmailField()
    customer_phone = serializers.CharField()
    movie_title = serializers.CharField()
    seat_count = serializers.IntegerField()
    total_amount = serializers.DecimalField(source="total_amount.amount", **MONEY)
    status = serializers.CharField(source="status.value")


class BookingResultSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    booking_id = serializers.CharField(allow_null=True)
    message = serializers.CharField()


class PaymentStatisticsSerializer(serializers.Serializer):
    total_payments = serializers.IntegerField()
    completed = serializers.IntegerField()
    failed = serializers.IntegerField()
    refunded = serializers.IntegerField()
    total_revenue = serializers.DecimalField(source="total_revenue.amount", **MONEY)


class InventoryReportSerializer(serializers.Serializer):
    bookings_tracked = serializers.IntegerField()
    seats_reserved = serializers.IntegerField()
    seats_released = serializers.IntegerField()
    net_seats_occupied = serializers.IntegerField()


class CustomerContactSerializer(serializers.Serializer):
    customer_email = serializers.EmailField()
    customer_phone = serializers.CharField(max_length=32)


class BookingRequestSerializer(CustomerContactSerializer):
    """Input for booking seats without paying."""

    customer_name = serializers.CharField(max_length=255)
    movie_id = serializers.IntegerField(min_value=1)
    ticket_type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    seat_count = serializers.IntegerField(min_value=1, max_value=20)
    showtime = serializers.DateTimeField()
    add_3d_glasses = serializers.BooleanField(default=False)
    add_snacks = serializers.BooleanField(default=False)

    def validate_showtime(self, value):
        # pricing rules read the local wall-clock time
        if timezone.is_aware(value):
            return timezone.make_naive(value)
        return value


class BookTicketsSerializer(BookingRequestSerializer):
    seat_rows = serializers.ListField(child=serializers.IntegerField(min_value=1))
    seat_numbers = serializers.ListField(child=serializers.IntegerField(min_value=1))

    def validate(self, attrs):
        seat_count = attrs["seat_count"]
        if len(attrs["seat_rows"]) < seat_count or len(attrs["seat_numbers"]) < seat_count:
            raise serializers.ValidationError(
                "seat_rows and seat_numbers must cover every seat"
            )
        return attrs


class WorkflowRequestSerializer(BookingRequestSerializer):
    payment_method = serializers.CharField(max_length=32)


class PaymentRequestSerializer(serializers.Serializer):
    """Payment input; contact details and amount default to the booking's."""

    payment_method = serializers.CharField(max_length=32)
    amount = serializers.DecimalField(required=False, min_value=Decimal("0"), **MONEY)
    customer_email = serializers.EmailField(required=False)
    customer_phone = serializers.CharField(required=False, max_length=32)


class CancelRequestSerializer(serializers.Serializer):
    customer_email = serializers.EmailField(required=False)
    customer_phone = serializers.CharField(required=False, max_length=32)
