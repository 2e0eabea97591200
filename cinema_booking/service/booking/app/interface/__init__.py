"""Application layer interfaces (Ports)"""

from cinema_booking.service.booking.app.interface.i_booking_command_repo import (
    IBookingCommandRepo,
)
from cinema_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from cinema_booking.service.booking.app.interface.i_cinema_hall_seating_command_repo import (
    ICinemaHallSeatingCommandRepo,
)
from cinema_booking.service.booking.app.interface.i_cinema_hall_seating_query_repo import (
    ICinemaHallSeatingQueryRepo,
)
from cinema_booking.service.booking.app.interface.i_movie_session_query_repo import (
    IMovieSessionQueryRepo,
)

__all__ = [
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'ICinemaHallSeatingCommandRepo',
    'ICinemaHallSeatingQueryRepo',
    'IMovieSessionQueryRepo',
]
