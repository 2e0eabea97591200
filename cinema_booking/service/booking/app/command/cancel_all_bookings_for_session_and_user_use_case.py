from typing import Self

from fastapi import Depends

from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.dto.batch_result import BatchResult


class CancelAllBookingsForSessionAndUserUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, user_id: int, movie_session_id: int) -> BatchResult:
        """Zero matching bookings is not an error: returns BatchResult(count=0)"""
        async with self.uow:
            count = await self.uow.booking_command_repo.delete_bookings_for_session_and_user(
                user_id=user_id, movie_session_id=movie_session_id
            )
            await self.uow.commit()

        Logger.base.info(
            f'🗑️ [CANCEL-ALL] {count} booking(s) of user {user_id} cancelled '
            f'for session {movie_session_id}'
        )
        return BatchResult(count=count)
