"""Application layer DTOs"""

from cinema_booking.service.booking.app.dto.availability_check_result import (
    AvailabilityCheckResult,
)
from cinema_booking.service.booking.app.dto.batch_result import BatchResult
from cinema_booking.service.booking.app.dto.user_booking_data import (
    UserBookingData,
    UserBookingDetail,
)

__all__ = [
    'AvailabilityCheckResult',
    'BatchResult',
    'UserBookingData',
    'UserBookingDetail',
]
