"""
Seating Schema Domain

Pure seating-schema logic with no infrastructure access:
physical layout -> source booking schema -> actual (availability overlay)
-> merged client-facing schema, plus validation of requested seats
against the merged schema.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol

from cinema_booking.platform.exception.exceptions import (
    DomainError,
    SeatAlreadyBookedError,
    SeatNotInSchemaError,
)
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.entity.physical_seat_entity import PhysicalSeat
from cinema_booking.service.booking.domain.enum.seat_type import SeatType
from cinema_booking.service.booking.domain.value_object.booking_schema_entry import (
    ActualBookingSchema,
    ActualBookingSchemaEntry,
    MergedFullCinemaBookingSeatingSchema,
    MergedSeatingSchemaEntry,
    SourceBookingSchema,
    SourceBookingSchemaEntry,
)
from cinema_booking.service.booking.domain.value_object.seat_position import (
    SeatPosition,
    SeatPosWithType,
)


class GridCell(Protocol):
    @property
    def row(self) -> int: ...

    @property
    def col(self) -> int: ...

    @property
    def type(self) -> SeatType: ...


def _format_positions(positions: Iterable[SeatPosition]) -> str:
    return ', '.join(f'({p.row},{p.col})' for p in positions)


@Logger.io
def generate_source_booking_schema(cinema_seating_schema: Sequence[GridCell]) -> SourceBookingSchema:
    """
    Map the physical grid to booking coordinates.

    Gaps are skipped; booking rows count only grid rows holding at least one
    bookable seat, booking cols count bookable seats within their grid row.
    Both are 0-based, so a gap-free hall has booking == grid coordinates.
    Output follows row-major grid order.
    """
    seen: set[tuple[int, int]] = set()
    for cell in cinema_seating_schema:
        if (cell.row, cell.col) in seen:
            raise DomainError(f'Duplicate cell at ({cell.row},{cell.col}) in hall layout')
        seen.add((cell.row, cell.col))

    bookable_cells = sorted(
        (cell for cell in cinema_seating_schema if cell.type.is_bookable),
        key=lambda cell: (cell.row, cell.col),
    )

    entries: list[SourceBookingSchemaEntry] = []
    booking_row = -1
    booking_col = 0
    current_grid_row: int | None = None
    for cell in bookable_cells:
        if cell.row != current_grid_row:
            current_grid_row = cell.row
            booking_row += 1
            booking_col = 0
        entries.append(
            SourceBookingSchemaEntry(
                row=cell.row,
                col=cell.col,
                booking_row=booking_row,
                booking_col=booking_col,
                type=cell.type,
            )
        )
        booking_col += 1

    return tuple(entries)


@Logger.io
def generate_actual_booking_schema(
    source_booking_schema: SourceBookingSchema,
    booked_seats_positions: Iterable[SeatPosition],
) -> ActualBookingSchema:
    """Overlay booked positions; duplicates in the booked input are harmless"""
    booked = {position.key for position in booked_seats_positions}
    return tuple(
        ActualBookingSchemaEntry.from_source(
            entry, is_booked=(entry.booking_row, entry.booking_col) in booked
        )
        for entry in source_booking_schema
    )


@Logger.io
def generate_merged_cinema_booking_seating_schema(
    cinema_seating_schema: Sequence[PhysicalSeat],
    actual_booking_schema: ActualBookingSchema,
) -> MergedFullCinemaBookingSeatingSchema:
    """
    Combine the physical layout with availability: every physical cell
    appears exactly once, gaps with empty booking coordinates.
    """
    actual_by_grid = {(entry.row, entry.col): entry for entry in actual_booking_schema}

    merged: list[MergedSeatingSchemaEntry] = []
    for seat in sorted(cinema_seating_schema, key=lambda s: (s.row, s.col)):
        entry = actual_by_grid.get((seat.row, seat.col))
        if entry is None:
            if seat.type.is_bookable:
                raise DomainError(
                    f'Seat ({seat.row},{seat.col}) of hall {seat.cinema_hall_id} '
                    'is missing from the booking schema',
                    500,
                )
            merged.append(
                MergedSeatingSchemaEntry(seat_id=seat.id, row=seat.row, col=seat.col, type=seat.type)
            )
            continue

        merged.append(
            MergedSeatingSchemaEntry(
                seat_id=seat.id,
                row=seat.row,
                col=seat.col,
                type=seat.type,
                booking_row=entry.booking_row,
                booking_col=entry.booking_col,
                is_booked=entry.is_booked,
            )
        )

    return tuple(merged)


@Logger.io
def select_desired_seats(
    merged_schema: MergedFullCinemaBookingSeatingSchema,
    desired_seats: Sequence[SeatPosition],
) -> tuple[SeatPosWithType, ...]:
    """
    All-or-nothing validation of requested seats against the merged schema.

    Raises:
        DomainError: empty or duplicated request
        SeatNotInSchemaError: a position is not a bookable seat of the hall
        SeatAlreadyBookedError: a position is already taken for the session
    """
    if not desired_seats:
        raise DomainError('At least one seat must be selected')

    keys = [seat.key for seat in desired_seats]
    if len(set(keys)) != len(keys):
        raise DomainError('Duplicate seat positions in booking request')

    bookable = {
        entry.booking_position.key: entry  # type: ignore[union-attr]
        for entry in merged_schema
        if entry.is_bookable
    }

    missing = [seat for seat in desired_seats if seat.key not in bookable]
    if missing:
        raise SeatNotInSchemaError(f'Seats not found in hall: {_format_positions(missing)}')

    taken = [seat for seat in desired_seats if bookable[seat.key].is_booked]
    if taken:
        raise SeatAlreadyBookedError(f'Seats already booked: {_format_positions(taken)}')

    return tuple(
        SeatPosWithType(row=seat.row, col=seat.col, type=bookable[seat.key].type)
        for seat in desired_seats
    )


@Logger.io
def annotate_positions_with_type(
    merged_schema: MergedFullCinemaBookingSeatingSchema,
    positions: Iterable[SeatPosition],
) -> list[SeatPosWithType]:
    """Attach seat types to booking-space positions; unknown positions are skipped"""
    type_by_position = {
        entry.booking_position.key: entry.type  # type: ignore[union-attr]
        for entry in merged_schema
        if entry.is_bookable
    }
    return [
        SeatPosWithType(row=position.row, col=position.col, type=type_by_position[position.key])
        for position in positions
        if position.key in type_by_position
    ]


@Logger.io
def partition_seats_by_availability(
    desired_seats: Sequence[SeatPosition],
    booked_seats_positions: Iterable[SeatPosition],
) -> tuple[list[SeatPosition], list[SeatPosition]]:
    """Split requested seats into (available, already booked), preserving request order"""
    booked = {position.key for position in booked_seats_positions}
    available = [seat for seat in desired_seats if seat.key not in booked]
    already_booked = [seat for seat in desired_seats if seat.key in booked]
    return available, already_booked
