"""
Booking Schema Value Objects

Source -> Actual -> Merged: each stage is an immutable tuple of these
records in row-major order of the hall grid.
"""

from typing import Optional, Self

import attrs

from cinema_booking.service.booking.domain.enum.seat_type import SeatType
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition


@attrs.define(frozen=True)
class SourceBookingSchemaEntry:
    row: int  # grid row
    col: int  # grid col
    booking_row: int
    booking_col: int
    type: SeatType

    @property
    def booking_position(self) -> SeatPosition:
        return SeatPosition(row=self.booking_row, col=self.booking_col)


@attrs.define(frozen=True)
class ActualBookingSchemaEntry(SourceBookingSchemaEntry):
    is_booked: bool = False

    @classmethod
    def from_source(cls, entry: SourceBookingSchemaEntry, *, is_booked: bool) -> Self:
        return cls(
            row=entry.row,
            col=entry.col,
            booking_row=entry.booking_row,
            booking_col=entry.booking_col,
            type=entry.type,
            is_booked=is_booked,
        )


@attrs.define(frozen=True)
class MergedSeatingSchemaEntry:
    """Client-facing cell: one per physical cell, gaps included"""

    seat_id: Optional[int]
    row: int
    col: int
    type: SeatType
    booking_row: Optional[int] = None
    booking_col: Optional[int] = None
    is_booked: bool = False

    @property
    def is_bookable(self) -> bool:
        return self.type.is_bookable and self.booking_row is not None

    @property
    def booking_position(self) -> Optional[SeatPosition]:
        if self.booking_row is None or self.booking_col is None:
            return None
        return SeatPosition(row=self.booking_row, col=self.booking_col)


SourceBookingSchema = tuple[SourceBookingSchemaEntry, ...]
ActualBookingSchema = tuple[ActualBookingSchemaEntry, ...]
MergedFullCinemaBookingSeatingSchema = tuple[MergedSeatingSchemaEntry, ...]
