from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from cinema_booking.platform.config.di import Container
from cinema_booking.platform.exception.exceptions import ForbiddenError, NotFoundError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from cinema_booking.service.booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_booking(self, *, booking_id: int, user_id: Optional[int] = None) -> Booking:
        """
        Raises:
            NotFoundError: booking does not exist
            ForbiddenError: user_id given and the booking belongs to someone else
        """
        booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)
        if not booking:
            raise NotFoundError('Booking not found')
        if user_id is not None and booking.user_id != user_id:
            raise ForbiddenError('Only the owner can view this booking')
        return booking
