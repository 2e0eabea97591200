"""
Booking Command Repository Implementation

Writes only; the surrounding unit of work commits or rolls back.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from cinema_booking.platform.exception.exceptions import SeatAlreadyBookedError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_command_repo import (
    IBookingCommandRepo,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.driven_adapter.model.booking_model import (
    SEAT_CONFLICT_CONSTRAINT,
    BookingModel,
    SeatOnBookingModel,
)
from cinema_booking.service.booking.driven_adapter.repo._session_mixin import SessionScopedRepo


# PostgreSQL reports the constraint name, SQLite only the constrained columns
_SEAT_CONFLICT_MARKERS = (
    SEAT_CONFLICT_CONSTRAINT,
    'seat_on_booking.movie_session_id, seat_on_booking.seat_id',
)


def _is_seat_conflict(error: IntegrityError) -> bool:
    message = str(error.orig)
    return any(marker in message for marker in _SEAT_CONFLICT_MARKERS)


class BookingCommandRepoImpl(SessionScopedRepo, IBookingCommandRepo):
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

    @Logger.io
    async def create_booking_with_seats(self, *, booking: Booking, seat_ids: List[int]) -> Booking:
        async with self._get_session() as session:
            db_booking = BookingModel(
                user_id=booking.user_id,
                movie_session_id=booking.movie_session_id,
                total_price=booking.total_price,
                currency=booking.currency,
                created_at=booking.created_at or datetime.now(timezone.utc),
            )
            session.add(db_booking)
            await session.flush()

            session.add_all(
                [
                    SeatOnBookingModel(
                        booking_id=db_booking.id,
                        seat_id=seat_id,
                        movie_session_id=booking.movie_session_id,
                    )
                    for seat_id in seat_ids
                ]
            )
            try:
                await session.flush()
            except IntegrityError as e:
                if not _is_seat_conflict(e):
                    raise
                Logger.base.warning(
                    f'⚠️ [BOOKING] Seat conflict for session {booking.movie_session_id}, '
                    f'seats {seat_ids}'
                )
                raise SeatAlreadyBookedError(
                    'One or more seats were booked by another request'
                ) from e

            return self._model_to_entity(db_booking)

    @Logger.io
    async def delete_booking_with_seats(self, *, booking_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(select(BookingModel).where(BookingModel.id == booking_id))
            db_booking = result.scalar_one_or_none()
            if not db_booking:
                return None

            deleted = self._model_to_entity(db_booking)
            await session.execute(
                delete(SeatOnBookingModel).where(SeatOnBookingModel.booking_id == booking_id)
            )
            await session.execute(delete(BookingModel).where(BookingModel.id == booking_id))
            return deleted

    @Logger.io
    async def delete_bookings_for_session_and_user(
        self, *, user_id: int, movie_session_id: int
    ) -> int:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel.id).where(
                    BookingModel.user_id == user_id,
                    BookingModel.movie_session_id == movie_session_id,
                )
            )
            booking_ids = list(result.scalars().all())
            if not booking_ids:
                return 0

            await session.execute(
                delete(SeatOnBookingModel).where(SeatOnBookingModel.booking_id.in_(booking_ids))
            )
            await session.execute(delete(BookingModel).where(BookingModel.id.in_(booking_ids)))
            return len(booking_ids)
