from collections.abc import Sequence
from typing import List

from sqlalchemy import and_, or_, select

from cinema_booking.platform.exception.exceptions import NotFoundError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_cinema_hall_seating_query_repo import (
    ICinemaHallSeatingQueryRepo,
)
from cinema_booking.service.booking.domain.entity.physical_seat_entity import PhysicalSeat
from cinema_booking.service.booking.domain.enum.seat_type import SeatType
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition
from cinema_booking.service.booking.driven_adapter.model.cinema_hall_model import CinemaHallModel
from cinema_booking.service.booking.driven_adapter.model.seat_model import SeatModel
from cinema_booking.service.booking.driven_adapter.repo._session_mixin import SessionScopedRepo


class CinemaHallSeatingQueryRepoImpl(SessionScopedRepo, ICinemaHallSeatingQueryRepo):
    @staticmethod
    def _model_to_entity(db_seat: SeatModel) -> PhysicalSeat:
        return PhysicalSeat(
            id=db_seat.id,
            cinema_hall_id=db_seat.cinema_hall_id,
            row=db_seat.row,
            col=db_seat.col,
            type=SeatType(db_seat.type),
            booking_row=db_seat.booking_row,
            booking_col=db_seat.booking_col,
        )

    @Logger.io
    async def exists(self, *, cinema_hall_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(CinemaHallModel.id).where(CinemaHallModel.id == cinema_hall_id)
            )
            return result.scalar_one_or_none() is not None

    @Logger.io(truncate_content=True)
    async def get_hall_seating_schema(self, *, cinema_hall_id: int) -> List[PhysicalSeat]:
        if not await self.exists(cinema_hall_id=cinema_hall_id):
            raise NotFoundError(f'Cinema hall {cinema_hall_id} not found')

        async with self._get_session() as session:
            result = await session.execute(
                select(SeatModel)
                .where(SeatModel.cinema_hall_id == cinema_hall_id)
                .order_by(SeatModel.row, SeatModel.col)
            )
            return [self._model_to_entity(db_seat) for db_seat in result.scalars().all()]

    @Logger.io
    async def resolve_positions_to_seat_ids(
        self, *, cinema_hall_id: int, positions: Sequence[SeatPosition]
    ) -> List[int]:
        if not positions:
            return []

        async with self._get_session() as session:
            result = await session.execute(
                select(SeatModel.id, SeatModel.booking_row, SeatModel.booking_col).where(
                    SeatModel.cinema_hall_id == cinema_hall_id,
                    or_(
                        *(
                            and_(
                                SeatModel.booking_row == position.row,
                                SeatModel.booking_col == position.col,
                            )
                            for position in positions
                        )
                    ),
                )
            )
            seat_id_by_position = {
                (row.booking_row, row.booking_col): row.id for row in result.all()
            }

        return [
            seat_id_by_position[position.key]
            for position in positions
            if position.key in seat_id_by_position
        ]
