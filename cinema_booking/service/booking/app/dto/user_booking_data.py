from typing import List

import attrs

from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosWithType


@attrs.define(frozen=True)
class UserBookingData:
    booking_id: int
    movie_session_id: int
    cinema_hall_id: int


@attrs.define(frozen=True)
class UserBookingDetail:
    """Booking together with the hall it is in and its typed seat positions"""

    booking: Booking
    cinema_hall_id: int
    seats: List[SeatPosWithType] = attrs.field(factory=list)
