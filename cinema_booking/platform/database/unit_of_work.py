"""
Unit of Work Pattern - one database session and transaction per request

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories get the shared session from the UoW
- Use cases coordinate several repositories through the UoW, so a booking
  and its seat associations commit (or roll back) together
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_booking.platform.database.orm_db_setting import get_async_session
from cinema_booking.platform.exception.exceptions import TransactionFailureError
from cinema_booking.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from cinema_booking.service.booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from cinema_booking.service.booking.app.interface.i_booking_query_repo import (
        IBookingQueryRepo,
    )
    from cinema_booking.service.booking.app.interface.i_cinema_hall_seating_command_repo import (
        ICinemaHallSeatingCommandRepo,
    )
    from cinema_booking.service.booking.app.interface.i_cinema_hall_seating_query_repo import (
        ICinemaHallSeatingQueryRepo,
    )
    from cinema_booking.service.booking.app.interface.i_movie_session_query_repo import (
        IMovieSessionQueryRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the booking service

    Usage:
        async with uow:
            booking = await uow.booking_command_repo.create_booking_with_seats(...)
            await uow.commit()

    Leaving the block without commit() rolls everything back.
    """

    # Booking repositories
    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo

    # Hall / session repositories
    hall_seating_command_repo: ICinemaHallSeatingCommandRepo
    hall_seating_query_repo: ICinemaHallSeatingQueryRepo
    movie_session_query_repo: IMovieSessionQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        from cinema_booking.service.booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.cinema_hall_seating_command_repo_impl import (
            CinemaHallSeatingCommandRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.cinema_hall_seating_query_repo_impl import (
            CinemaHallSeatingQueryRepoImpl,
        )
        from cinema_booking.service.booking.driven_adapter.repo.movie_session_query_repo_impl import (
            MovieSessionQueryRepoImpl,
        )

        # Every repo shares this UoW's session
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session=self.session)
        self.hall_seating_command_repo = CinemaHallSeatingCommandRepoImpl(session=self.session)
        self.hall_seating_query_repo = CinemaHallSeatingQueryRepoImpl(session=self.session)
        self.movie_session_query_repo = MovieSessionQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args):
        await super().__aexit__(*args)
        # Note: session cleanup handled by get_async_session context manager

    async def _commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            Logger.base.error(f'💥 [UOW] Commit failed: {e}')
            await self.session.rollback()
            raise TransactionFailureError('Transaction failed, no changes were saved') from e

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """FastAPI dependency for Unit of Work"""
    return SqlAlchemyUnitOfWork(session)
