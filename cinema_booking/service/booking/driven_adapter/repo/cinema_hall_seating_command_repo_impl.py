from typing import List

from sqlalchemy import select

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_cinema_hall_seating_command_repo import (
    ICinemaHallSeatingCommandRepo,
)
from cinema_booking.service.booking.domain.entity.physical_seat_entity import PhysicalSeat
from cinema_booking.service.booking.domain.value_object.booking_schema_entry import (
    SourceBookingSchema,
)
from cinema_booking.service.booking.domain.value_object.seat_position import LayoutCell
from cinema_booking.service.booking.driven_adapter.model.seat_model import SeatModel
from cinema_booking.service.booking.driven_adapter.repo._session_mixin import SessionScopedRepo
from cinema_booking.service.booking.driven_adapter.repo.cinema_hall_seating_query_repo_impl import (
    CinemaHallSeatingQueryRepoImpl,
)


class CinemaHallSeatingCommandRepoImpl(SessionScopedRepo, ICinemaHallSeatingCommandRepo):
    @Logger.io
    async def has_seats(self, *, cinema_hall_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(SeatModel.id).where(SeatModel.cinema_hall_id == cinema_hall_id).limit(1)
            )
            return result.scalar_one_or_none() is not None

    @Logger.io(truncate_content=True)
    async def create_hall_seats(
        self,
        *,
        cinema_hall_id: int,
        cells: List[LayoutCell],
        source_booking_schema: SourceBookingSchema,
    ) -> List[PhysicalSeat]:
        source_by_grid = {(entry.row, entry.col): entry for entry in source_booking_schema}

        db_seats: List[SeatModel] = []
        for cell in cells:
            entry = source_by_grid.get((cell.row, cell.col))
            db_seats.append(
                SeatModel(
                    cinema_hall_id=cinema_hall_id,
                    row=cell.row,
                    col=cell.col,
                    type=cell.type.value,
                    booking_row=entry.booking_row if entry else None,
                    booking_col=entry.booking_col if entry else None,
                )
            )

        async with self._get_session() as session:
            session.add_all(db_seats)
            await session.flush()

        Logger.base.info(f'🪑 [SEATING] Persisted {len(db_seats)} cells for hall {cinema_hall_id}')
        return [CinemaHallSeatingQueryRepoImpl._model_to_entity(db_seat) for db_seat in db_seats]
