from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select

from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_movie_session_query_repo import (
    IMovieSessionQueryRepo,
)
from cinema_booking.service.booking.domain.entity.movie_session_entity import (
    MovieSession,
    MovieSessionMultiFactor,
)
from cinema_booking.service.booking.domain.enum.seat_type import SeatType
from cinema_booking.service.booking.driven_adapter.model.movie_session_model import (
    MovieSessionModel,
    MovieSessionMultiFactorModel,
)
from cinema_booking.service.booking.driven_adapter.repo._session_mixin import SessionScopedRepo


class MovieSessionQueryRepoImpl(SessionScopedRepo, IMovieSessionQueryRepo):
    @staticmethod
    def _model_to_entity(db_session: MovieSessionModel) -> MovieSession:
        return MovieSession(
            id=db_session.id,
            cinema_hall_id=db_session.cinema_hall_id,
            base_price=Decimal(db_session.base_price),
            currency=db_session.currency,
        )

    @staticmethod
    def _model_to_multi_factor(db_factor: MovieSessionMultiFactorModel) -> MovieSessionMultiFactor:
        return MovieSessionMultiFactor(
            movie_session_id=db_factor.movie_session_id,
            type_seat=SeatType(db_factor.type_seat),
            price_factor=Decimal(db_factor.price_factor),
        )

    @Logger.io
    async def get_by_id(self, *, movie_session_id: int) -> Optional[MovieSession]:
        async with self._get_session() as session:
            result = await session.execute(
                select(MovieSessionModel).where(MovieSessionModel.id == movie_session_id)
            )
            db_session = result.scalar_one_or_none()
            if not db_session:
                return None
            return self._model_to_entity(db_session)

    @Logger.io
    async def get_multi_factors(self, *, movie_session_id: int) -> List[MovieSessionMultiFactor]:
        async with self._get_session() as session:
            result = await session.execute(
                select(MovieSessionMultiFactorModel).where(
                    MovieSessionMultiFactorModel.movie_session_id == movie_session_id
                )
            )
            return [self._model_to_multi_factor(db_factor) for db_factor in result.scalars().all()]
