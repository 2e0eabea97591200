"""Builders shared by booking unit and integration tests"""

from collections.abc import Sequence
from decimal import Decimal
from unittest.mock import AsyncMock

from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork
from cinema_booking.service.booking.domain.entity.movie_session_entity import (
    MovieSession,
    MovieSessionMultiFactor,
)
from cinema_booking.service.booking.domain.entity.physical_seat_entity import PhysicalSeat
from cinema_booking.service.booking.domain.enum.seat_type import SeatType


S = SeatType.STANDARD
V = SeatType.VIP
C = SeatType.COUPLE
G = SeatType.GAP


def build_hall(layout: Sequence[Sequence[SeatType]], *, cinema_hall_id: int = 1) -> list[PhysicalSeat]:
    """
    Physical seats of a layout, ids assigned row-major from 1.

    Booking coordinates are left empty: the schema generator derives them.
    """
    seats: list[PhysicalSeat] = []
    for row_index, row in enumerate(layout):
        for col_index, seat_type in enumerate(row):
            seats.append(
                PhysicalSeat(
                    id=len(seats) + 1,
                    cinema_hall_id=cinema_hall_id,
                    row=row_index,
                    col=col_index,
                    type=seat_type,
                )
            )
    return seats


def build_movie_session(
    *, movie_session_id: int = 1, cinema_hall_id: int = 1, base_price: str = '10'
) -> MovieSession:
    return MovieSession(
        id=movie_session_id,
        cinema_hall_id=cinema_hall_id,
        base_price=Decimal(base_price),
        currency='USD',
    )


def build_factor(seat_type: SeatType, factor: str, *, movie_session_id: int = 1) -> MovieSessionMultiFactor:
    return MovieSessionMultiFactor(
        movie_session_id=movie_session_id, type_seat=seat_type, price_factor=Decimal(factor)
    )


class FakeUnitOfWork(AbstractUnitOfWork):
    """In-memory unit of work: AsyncMock repositories, commit/rollback recorded"""

    def __init__(self) -> None:
        self.booking_command_repo = AsyncMock()
        self.booking_query_repo = AsyncMock()
        self.hall_seating_command_repo = AsyncMock()
        self.hall_seating_query_repo = AsyncMock()
        self.movie_session_query_repo = AsyncMock()
        self.committed = 0
        self.rolled_back = 0

    async def _commit(self) -> None:
        self.committed += 1

    async def rollback(self) -> None:
        self.rolled_back += 1
