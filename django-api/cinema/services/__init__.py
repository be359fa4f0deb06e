from cinema.services.booking_service import BookingService
from cinema.services.booking_workflow import BookingWorkflow, build_booking_workflow
from cinema.services.payment_service import PaymentService

__all__ = ["BookingService", "BookingWorkflow", "PaymentService", "build_booking_workflow"]
