"""
Seat Position Value Objects

SeatPosition addresses a seat in booking coordinate space (gaps skipped,
0-based, dense). LayoutCell addresses a cell of the raw hall grid.
"""

from collections.abc import Mapping
from typing import Self

import attrs

from cinema_booking.platform.exception.exceptions import DomainError
from cinema_booking.service.booking.domain.enum.seat_type import SeatType


@attrs.define(frozen=True)
class SeatPosition:
    row: int
    col: int

    @property
    def key(self) -> tuple[int, int]:
        return (self.row, self.col)

    @classmethod
    def from_row(cls, row: object) -> Self:
        """
        Map a raw query row with named `row`/`col` columns to a position.

        Accepts SQLAlchemy rows, mappings and objects exposing `row`/`col`.
        Bare positional tuples fail: their column order is not self-describing.
        """
        mapping = getattr(row, '_mapping', row)
        try:
            if isinstance(mapping, Mapping):
                return cls(row=int(mapping['row']), col=int(mapping['col']))
            return cls(row=int(row.row), col=int(row.col))  # type: ignore[attr-defined]
        except (KeyError, AttributeError, TypeError, ValueError) as e:
            raise DomainError(f'Malformed seat position row: {row!r}', 500) from e


@attrs.define(frozen=True)
class SeatPosWithType:
    """Booking-space position annotated with its seat type"""

    row: int
    col: int
    type: SeatType


@attrs.define(frozen=True)
class LayoutCell:
    """Grid cell of a hall layout before it is persisted"""

    row: int
    col: int
    type: SeatType
