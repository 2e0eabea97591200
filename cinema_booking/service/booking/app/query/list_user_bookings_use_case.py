from typing import Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from cinema_booking.platform.config.di import Container
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.dto.user_booking_data import UserBookingDetail
from cinema_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from cinema_booking.service.booking.app.interface.i_cinema_hall_seating_query_repo import (
    ICinemaHallSeatingQueryRepo,
)
from cinema_booking.service.booking.app.interface.i_movie_session_query_repo import (
    IMovieSessionQueryRepo,
)
from cinema_booking.service.booking.app.query.get_booking_seating_schema_use_case import (
    GetBookingSeatingSchemaUseCase,
)
from cinema_booking.service.booking.domain.seating_schema_domain import (
    annotate_positions_with_type,
)
from cinema_booking.service.booking.domain.value_object.booking_schema_entry import (
    MergedFullCinemaBookingSeatingSchema,
)
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosWithType


class ListUserBookingsUseCase:
    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        hall_seating_query_repo: ICinemaHallSeatingQueryRepo,
        movie_session_query_repo: IMovieSessionQueryRepo,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.seating_schema = GetBookingSeatingSchemaUseCase(
            hall_seating_query_repo=hall_seating_query_repo,
            booking_query_repo=booking_query_repo,
            movie_session_query_repo=movie_session_query_repo,
        )

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        hall_seating_query_repo: ICinemaHallSeatingQueryRepo = Depends(
            Provide[Container.hall_seating_query_repo]
        ),
        movie_session_query_repo: IMovieSessionQueryRepo = Depends(
            Provide[Container.movie_session_query_repo]
        ),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo,
            hall_seating_query_repo=hall_seating_query_repo,
            movie_session_query_repo=movie_session_query_repo,
        )

    @Logger.io
    async def find_seats_by_booking_id(
        self, *, merged_schema: MergedFullCinemaBookingSeatingSchema, booking_id: int
    ) -> List[SeatPosWithType]:
        positions = await self.booking_query_repo.find_seat_positions_by_booking_id(
            booking_id=booking_id
        )
        return annotate_positions_with_type(merged_schema, positions)

    @Logger.io
    async def execute(self, *, user_id: int) -> List[UserBookingDetail]:
        bookings_data = await self.booking_query_repo.find_bookings_data_by_user(user_id=user_id)

        # One schema per session, shared by all of the user's bookings in it
        schemas: Dict[int, MergedFullCinemaBookingSeatingSchema] = {}
        details: List[UserBookingDetail] = []
        for data in bookings_data:
            booking = await self.booking_query_repo.get_by_id(booking_id=data.booking_id)
            if not booking:
                continue  # cancelled between the two reads

            if data.movie_session_id not in schemas:
                schemas[data.movie_session_id] = await self.seating_schema.build(
                    movie_session_id=data.movie_session_id,
                    cinema_hall_id=data.cinema_hall_id,
                )
            seats = await self.find_seats_by_booking_id(
                merged_schema=schemas[data.movie_session_id], booking_id=data.booking_id
            )
            details.append(
                UserBookingDetail(booking=booking, cinema_hall_id=data.cinema_hall_id, seats=seats)
            )

        return details
