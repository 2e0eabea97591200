from typing import Optional, Self

from fastapi import Depends

from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from cinema_booking.platform.exception.exceptions import ForbiddenError, NotFoundError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.entity.booking_entity import Booking


class CancelBookingUseCase:
    """Delete a booking and its seat associations in one transaction"""

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, booking_id: int, user_id: Optional[int] = None) -> Booking:
        """
        Returns the deleted booking.

        Raises:
            NotFoundError: booking does not exist
            ForbiddenError: user_id given and the booking belongs to someone else
        """
        async with self.uow:
            booking = await self.uow.booking_query_repo.get_by_id(booking_id=booking_id)
            if not booking:
                raise NotFoundError(f'Booking {booking_id} not found')
            if user_id is not None and booking.user_id != user_id:
                raise ForbiddenError('Only the owner can cancel this booking')

            deleted = await self.uow.booking_command_repo.delete_booking_with_seats(
                booking_id=booking_id
            )
            if not deleted:
                raise NotFoundError(f'Booking {booking_id} not found')
            await self.uow.commit()

        Logger.base.info(f'🗑️ [CANCEL] Booking {booking_id} cancelled')
        return deleted
