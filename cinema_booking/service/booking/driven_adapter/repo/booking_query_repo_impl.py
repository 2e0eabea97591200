from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.dto.user_booking_data import UserBookingData
from cinema_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition
from cinema_booking.service.booking.driven_adapter.model.booking_model import (
    BookingModel,
    SeatOnBookingModel,
)
from cinema_booking.service.booking.driven_adapter.model.movie_session_model import (
    MovieSessionModel,
)
from cinema_booking.service.booking.driven_adapter.model.seat_model import SeatModel
from cinema_booking.service.booking.driven_adapter.repo._session_mixin import SessionScopedRepo


class BookingQueryRepoImpl(SessionScopedRepo, IBookingQueryRepo):
    @staticmethod
    def _model_to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            movie_session_id=db_booking.movie_session_id,
            total_price=Decimal(db_booking.total_price),
            currency=db_booking.currency,
            created_at=db_booking.created_at,
        )

    @staticmethod
    def _booked_positions_query():
        # Named columns so rows map by name, never by position
        return select(
            SeatModel.booking_row.label('row'),
            SeatModel.booking_col.label('col'),
        ).join(SeatOnBookingModel, SeatOnBookingModel.seat_id == SeatModel.id)

    @Logger.io(truncate_content=True)
    async def find_booked_seat_positions_for_movie_session(
        self, *, movie_session_id: int
    ) -> List[SeatPosition]:
        async with self._get_session() as session:
            result = await session.execute(
                self._booked_positions_query().where(
                    SeatOnBookingModel.movie_session_id == movie_session_id
                )
            )
            return [SeatPosition.from_row(row) for row in result.all()]

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(select(BookingModel).where(BookingModel.id == booking_id))
            db_booking = result.scalar_one_or_none()
            if not db_booking:
                return None
            return self._model_to_entity(db_booking)

    @Logger.io
    async def find_bookings_data_by_user(self, *, user_id: int) -> List[UserBookingData]:
        async with self._get_session() as session:
            result = await session.execute(
                select(
                    BookingModel.id.label('booking_id'),
                    BookingModel.movie_session_id,
                    MovieSessionModel.cinema_hall_id,
                )
                .join(MovieSessionModel, MovieSessionModel.id == BookingModel.movie_session_id)
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.id)
            )
            return [
                UserBookingData(
                    booking_id=row.booking_id,
                    movie_session_id=row.movie_session_id,
                    cinema_hall_id=row.cinema_hall_id,
                )
                for row in result.all()
            ]

    @Logger.io
    async def find_seat_positions_by_booking_id(self, *, booking_id: int) -> List[SeatPosition]:
        async with self._get_session() as session:
            result = await session.execute(
                self._booked_positions_query()
                .where(SeatOnBookingModel.booking_id == booking_id)
                .order_by(SeatModel.booking_row, SeatModel.booking_col)
            )
            return [SeatPosition.from_row(row) for row in result.all()]
