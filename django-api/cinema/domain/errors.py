"""Domain error codes for the cinema module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_TICKET_TYPE = "UNKNOWN_TICKET_TYPE"
    MOVIE_NOT_FOUND = "MOVIE_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    PAYMENT_NOT_FOUND = "PAYMENT_NOT_FOUND"
    GATEWAY_NOT_FOUND = "GATEWAY_NOT_FOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    GATEWAY_TIMEOUT = "GATEWAY_TIMEOUT"
    REFUND_FAILED = "REFUND_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a booking precondition is missing or a record is malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)
        self.field = field


class UnknownTicketTypeError(DomainError):
    """Raised when the ticket catalog has no variant for a tag."""

    def __init__(self, ticket_type: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_TICKET_TYPE,
            message=f"Unknown ticket type: {ticket_type}",
        )
        self.ticket_type = ticket_type


class MovieNotFoundError(DomainError):
    """Raised when a movie is not found."""

    def __init__(self, movie_id: int) -> None:
        super().__init__(code=ErrorCode.MOVIE_NOT_FOUND, message="Movie not found")
        self.movie_id = movie_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(code=ErrorCode.BOOKING_NOT_FOUND, message="Booking not found")
        self.booking_id = booking_id


class GatewayNotFoundError(DomainError):
    """Raised when no payment gateway is registered for a method."""

    def __init__(self, method: str) -> None:
        super().__init__(
            code=ErrorCode.GATEWAY_NOT_FOUND,
            message=f"Payment gateway not available: {method}",
        )
        self.method = method


class InvalidAmountError(DomainError):
    """Raised inside a gateway when an amount is outside its accepted range."""

    def __init__(self, gateway: str, amount: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AMOUNT,
            message=f"Amount {amount} rejected by {gateway}",
        )
        self.gateway = gateway


class GatewayTimeoutError(DomainError):
    """Raised inside a gateway when the simulated call exceeds its timeout."""

    def __init__(self, gateway: str, timeout: float) -> None:
        super().__init__(
            code=ErrorCode.GATEWAY_TIMEOUT,
            message=f"{gateway} did not respond within {timeout:.2f}s",
        )
        self.gateway = gateway
