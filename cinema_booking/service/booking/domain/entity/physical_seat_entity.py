from typing import Optional

import attrs

from cinema_booking.service.booking.domain.enum.seat_type import SeatType


@attrs.define(frozen=True)
class PhysicalSeat:
    """
    Persisted grid cell of a cinema hall.

    `row`/`col` are raw grid indices; `booking_row`/`booking_col` are the
    booking coordinates fixed when the hall seating was initialised (None
    for gaps). Immutable once seating is finalised.
    """

    id: int
    cinema_hall_id: int
    row: int
    col: int
    type: SeatType
    booking_row: Optional[int] = None
    booking_col: Optional[int] = None
