from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from cinema_booking.platform.config.di import Container
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.dto.availability_check_result import (
    AvailabilityCheckResult,
)
from cinema_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from cinema_booking.service.booking.domain.seating_schema_domain import (
    partition_seats_by_availability,
)
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition


class CheckSeatsAvailabilityUseCase:
    """
    Advisory pre-check only: nothing is held, so a seat reported free can
    still be taken before create_booking commits.
    """

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
    async def execute(
        self, *, movie_session_id: int, desired_seats: List[SeatPosition]
    ) -> AvailabilityCheckResult:
        booked_seats_positions = (
            await self.booking_query_repo.find_booked_seat_positions_for_movie_session(
                movie_session_id=movie_session_id
            )
        )
        _, already_booked = partition_seats_by_availability(desired_seats, booked_seats_positions)
        return AvailabilityCheckResult(
            all_seats_are_available=not already_booked,
            booked_seats=already_booked,
        )
