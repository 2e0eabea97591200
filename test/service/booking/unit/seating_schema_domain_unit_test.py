"""
Unit tests for the seating schema pipeline

layout -> source booking schema -> actual (overlay) -> merged
"""

import pytest

from cinema_booking.platform.exception.exceptions import (
    DomainError,
    SeatAlreadyBookedError,
    SeatNotInSchemaError,
)
from cinema_booking.service.booking.domain.seating_schema_domain import (
    annotate_positions_with_type,
    generate_actual_booking_schema,
    generate_merged_cinema_booking_seating_schema,
    generate_source_booking_schema,
    partition_seats_by_availability,
    select_desired_seats,
)
from cinema_booking.service.booking.domain.value_object.seat_position import (
    LayoutCell,
    SeatPosition,
    SeatPosWithType,
)
from test.service.booking.fixtures import C, G, S, V, build_hall


GAP_FREE_LAYOUT = [[S, V], [S, S]]
AISLE_LAYOUT = [
    [S, G, S],
    [G, G, G],
    [V, C, G],
]


def _merged(layout, booked=()):
    hall = build_hall(layout)
    source = generate_source_booking_schema(hall)
    actual = generate_actual_booking_schema(source, list(booked))
    return generate_merged_cinema_booking_seating_schema(hall, actual)


@pytest.mark.unit
class TestGenerateSourceBookingSchema:
    def test_gap_free_hall_uses_grid_coordinates(self):
        source = generate_source_booking_schema(build_hall(GAP_FREE_LAYOUT))

        assert [(e.booking_row, e.booking_col) for e in source] == [(0, 0), (0, 1), (1, 0), (1, 1)]
        assert [(e.row, e.col) for e in source] == [(0, 0), (0, 1), (1, 0), (1, 1)]
        assert source[1].type == V

    def test_gaps_and_empty_rows_are_skipped(self):
        """
        Given: aisle in the middle column and a row made only of gaps
        When: generating the source booking schema
        Then: booking coordinates are dense and 0-based, one entry per real seat
        """
        source = generate_source_booking_schema(build_hall(AISLE_LAYOUT))

        assert [(e.row, e.col, e.booking_row, e.booking_col) for e in source] == [
            (0, 0, 0, 0),
            (0, 2, 0, 1),
            (2, 0, 1, 0),
            (2, 1, 1, 1),
        ]
        assert [e.type for e in source] == [S, S, V, C]

    def test_is_pure_and_order_independent(self):
        hall = build_hall(AISLE_LAYOUT)

        first = generate_source_booking_schema(hall)
        second = generate_source_booking_schema(hall)
        shuffled = generate_source_booking_schema(list(reversed(hall)))

        assert first == second == shuffled

    def test_accepts_unpersisted_layout_cells(self):
        cells = [LayoutCell(row=0, col=0, type=G), LayoutCell(row=0, col=1, type=V)]

        source = generate_source_booking_schema(cells)

        assert len(source) == 1
        assert (source[0].booking_row, source[0].booking_col, source[0].type) == (0, 0, V)

    def test_duplicate_cell_is_rejected(self):
        cells = [LayoutCell(row=0, col=0, type=S), LayoutCell(row=0, col=0, type=V)]

        with pytest.raises(DomainError):
            generate_source_booking_schema(cells)


@pytest.mark.unit
class TestGenerateActualBookingSchema:
    def test_nothing_booked_marks_every_seat_available(self):
        merged = _merged(AISLE_LAYOUT)

        assert len(merged) == 9  # every physical cell, gaps included
        assert not any(entry.is_booked for entry in merged)

    def test_exactly_the_booked_positions_are_marked(self):
        source = generate_source_booking_schema(build_hall(AISLE_LAYOUT))
        booked = [SeatPosition(row=0, col=1), SeatPosition(row=1, col=0)]

        actual = generate_actual_booking_schema(source, booked)

        marked = {(e.booking_row, e.booking_col) for e in actual if e.is_booked}
        assert marked == {(0, 1), (1, 0)}
        assert len(actual) == len(source)

    def test_duplicate_booked_positions_are_harmless(self):
        source = generate_source_booking_schema(build_hall(GAP_FREE_LAYOUT))
        booked = [SeatPosition(row=0, col=0)] * 3

        actual = generate_actual_booking_schema(source, booked)

        assert [e.is_booked for e in actual] == [True, False, False, False]

    def test_source_schema_is_left_untouched(self):
        source = generate_source_booking_schema(build_hall(GAP_FREE_LAYOUT))
        snapshot = tuple(source)

        generate_actual_booking_schema(source, [SeatPosition(row=1, col=1)])

        assert source == snapshot
        assert not hasattr(source[0], 'is_booked')


@pytest.mark.unit
class TestGenerateMergedSchema:
    def test_gaps_keep_their_cell_without_booking_coordinates(self):
        merged = _merged(AISLE_LAYOUT, booked=[SeatPosition(row=1, col=1)])

        gap = next(e for e in merged if (e.row, e.col) == (0, 1))
        assert gap.type == G
        assert gap.booking_row is None and gap.booking_col is None
        assert gap.is_booked is False
        assert gap.is_bookable is False

        couple = next(e for e in merged if (e.row, e.col) == (2, 1))
        assert (couple.booking_row, couple.booking_col) == (1, 1)
        assert couple.type == C
        assert couple.is_booked is True
        assert couple.seat_id == 8

    def test_seat_missing_from_booking_schema_is_an_internal_error(self):
        hall = build_hall(GAP_FREE_LAYOUT)
        source = generate_source_booking_schema(hall[:3])
        actual = generate_actual_booking_schema(source, [])

        with pytest.raises(DomainError) as exc_info:
            generate_merged_cinema_booking_seating_schema(hall, actual)

        assert exc_info.value.status_code == 500


@pytest.mark.unit
class TestSelectDesiredSeats:
    def test_returns_seats_with_their_types(self):
        merged = _merged(AISLE_LAYOUT)

        selected = select_desired_seats(
            merged, [SeatPosition(row=1, col=1), SeatPosition(row=0, col=0)]
        )

        assert selected == (
            SeatPosWithType(row=1, col=1, type=C),
            SeatPosWithType(row=0, col=0, type=S),
        )

    def test_empty_request_is_rejected(self):
        with pytest.raises(DomainError):
            select_desired_seats(_merged(GAP_FREE_LAYOUT), [])

    def test_duplicate_positions_are_rejected(self):
        seat = SeatPosition(row=0, col=0)

        with pytest.raises(DomainError) as exc_info:
            select_desired_seats(_merged(GAP_FREE_LAYOUT), [seat, seat])

        assert exc_info.type is DomainError

    def test_unknown_position_fails_the_whole_request(self):
        """
        Given: one valid and one out-of-hall position
        When: selecting desired seats
        Then: nothing is silently dropped, the whole request fails
        """
        with pytest.raises(SeatNotInSchemaError) as exc_info:
            select_desired_seats(
                _merged(GAP_FREE_LAYOUT),
                [SeatPosition(row=0, col=0), SeatPosition(row=5, col=5)],
            )

        assert '(5,5)' in exc_info.value.message
        assert exc_info.value.status_code == 400

    def test_already_booked_seat_fails_fast(self):
        merged = _merged(GAP_FREE_LAYOUT, booked=[SeatPosition(row=0, col=1)])

        with pytest.raises(SeatAlreadyBookedError) as exc_info:
            select_desired_seats(merged, [SeatPosition(row=0, col=0), SeatPosition(row=0, col=1)])

        assert exc_info.value.status_code == 409


@pytest.mark.unit
class TestSeatHelpers:
    def test_annotate_skips_positions_outside_the_hall(self):
        merged = _merged(GAP_FREE_LAYOUT)

        seats = annotate_positions_with_type(
            merged, [SeatPosition(row=0, col=1), SeatPosition(row=9, col=9)]
        )

        assert seats == [SeatPosWithType(row=0, col=1, type=V)]

    def test_partition_keeps_request_order(self):
        desired = [SeatPosition(row=0, col=2), SeatPosition(row=0, col=1), SeatPosition(row=0, col=0)]

        available, booked = partition_seats_by_availability(
            desired, [SeatPosition(row=0, col=1), SeatPosition(row=0, col=1)]
        )

        assert available == [SeatPosition(row=0, col=2), SeatPosition(row=0, col=0)]
        assert booked == [SeatPosition(row=0, col=1)]
