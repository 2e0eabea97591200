from collections.abc import Sequence
from typing import List, Self

from fastapi import Depends

from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from cinema_booking.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.entity.physical_seat_entity import PhysicalSeat
from cinema_booking.service.booking.domain.enum.seat_type import SeatType
from cinema_booking.service.booking.domain.seating_schema_domain import (
    generate_source_booking_schema,
)
from cinema_booking.service.booking.domain.value_object.seat_position import LayoutCell


class InitHallSeatingUseCase:
    """
    Persist the seating layout of a hall, once.

    `layout[row][col]` is the seat type of that grid cell; SeatType.GAP
    marks an aisle. Booking coordinates are computed here and stored on
    each seat, so later reads never recompute them from the grid.
    """

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @staticmethod
    def _layout_to_cells(layout: Sequence[Sequence[SeatType]]) -> List[LayoutCell]:
        return [
            LayoutCell(row=row_index, col=col_index, type=SeatType(seat_type))
            for row_index, row in enumerate(layout)
            for col_index, seat_type in enumerate(row)
        ]

    @Logger.io
    async def execute(
        self, *, cinema_hall_id: int, layout: Sequence[Sequence[SeatType]]
    ) -> List[PhysicalSeat]:
        cells = self._layout_to_cells(layout)
        if not any(cell.type.is_bookable for cell in cells):
            raise DomainError('Hall layout must contain at least one bookable seat')

        source_booking_schema = generate_source_booking_schema(cells)

        async with self.uow:
            if not await self.uow.hall_seating_query_repo.exists(cinema_hall_id=cinema_hall_id):
                raise NotFoundError(f'Cinema hall {cinema_hall_id} not found')
            if await self.uow.hall_seating_command_repo.has_seats(cinema_hall_id=cinema_hall_id):
                raise ConflictError(f'Seating of cinema hall {cinema_hall_id} is already set')

            seats = await self.uow.hall_seating_command_repo.create_hall_seats(
                cinema_hall_id=cinema_hall_id,
                cells=cells,
                source_booking_schema=source_booking_schema,
            )
            await self.uow.commit()

        return seats
