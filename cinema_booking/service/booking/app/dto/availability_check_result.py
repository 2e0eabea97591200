"""Availability check result DTO."""

from typing import List

import attrs

from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition


@attrs.define(frozen=True)
class AvailabilityCheckResult:
    """
    Advisory result of a seat availability pre-check.

    Not a reservation: seats reported available here can still be taken
    before the booking commits.
    """

    all_seats_are_available: bool
    booked_seats: List[SeatPosition] = attrs.field(factory=list)
