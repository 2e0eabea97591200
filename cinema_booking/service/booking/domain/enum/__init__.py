"""Booking Domain Enums"""

from cinema_booking.service.booking.domain.enum.seat_type import SeatType

__all__ = ['SeatType']
