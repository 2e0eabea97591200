from decimal import Decimal

import attrs

from cinema_booking.service.booking.domain.enum.seat_type import SeatType


@attrs.define(frozen=True)
class MovieSession:
    id: int
    cinema_hall_id: int
    base_price: Decimal
    currency: str


@attrs.define(frozen=True)
class MovieSessionMultiFactor:
    """Per-session price multiplier for one seat type"""

    movie_session_id: int
    type_seat: SeatType
    price_factor: Decimal
