"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from cinema_booking.service.booking.driven_adapter.model.booking_model import (
    BookingModel,
    SeatOnBookingModel,
)
from cinema_booking.service.booking.driven_adapter.model.cinema_hall_model import CinemaHallModel
from cinema_booking.service.booking.driven_adapter.model.movie_session_model import (
    MovieSessionModel,
    MovieSessionMultiFactorModel,
)
from cinema_booking.service.booking.driven_adapter.model.seat_model import SeatModel

__all__ = [
    'BookingModel',
    'CinemaHallModel',
    'MovieSessionModel',
    'MovieSessionMultiFactorModel',
    'SeatModel',
    'SeatOnBookingModel',
]
