from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from cinema_booking.platform.config.di import Container
from cinema_booking.platform.exception.exceptions import NotFoundError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from cinema_booking.service.booking.app.interface.i_cinema_hall_seating_query_repo import (
    ICinemaHallSeatingQueryRepo,
)
from cinema_booking.service.booking.app.interface.i_movie_session_query_repo import (
    IMovieSessionQueryRepo,
)
from cinema_booking.service.booking.domain.seating_schema_domain import (
    generate_actual_booking_schema,
    generate_merged_cinema_booking_seating_schema,
    generate_source_booking_schema,
)
from cinema_booking.service.booking.domain.value_object.booking_schema_entry import (
    MergedFullCinemaBookingSeatingSchema,
)


class GetBookingSeatingSchemaUseCase:
    """
    Seating read model for one movie session.

    layout -> source booking schema -> overlay of booked seats -> merged
    schema. Always read fresh from the store, never cached.
    """

    def __init__(
        self,
        *,
        hall_seating_query_repo: ICinemaHallSeatingQueryRepo,
        booking_query_repo: IBookingQueryRepo,
        movie_session_query_repo: IMovieSessionQueryRepo,
    ) -> None:
        self.hall_seating_query_repo = hall_seating_query_repo
        self.booking_query_repo = booking_query_repo
        self.movie_session_query_repo = movie_session_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        hall_seating_query_repo: ICinemaHallSeatingQueryRepo = Depends(
            Provide[Container.hall_seating_query_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        movie_session_query_repo: IMovieSessionQueryRepo = Depends(
            Provide[Container.movie_session_query_repo]
        ),
    ) -> Self:
        return cls(
            hall_seating_query_repo=hall_seating_query_repo,
            booking_query_repo=booking_query_repo,
            movie_session_query_repo=movie_session_query_repo,
        )

    @Logger.io
    async def execute(self, *, movie_session_id: int) -> MergedFullCinemaBookingSeatingSchema:
        movie_session = await self.movie_session_query_repo.get_by_id(
            movie_session_id=movie_session_id
        )
        if not movie_session:
            raise NotFoundError(f'Movie session {movie_session_id} not found')

        return await self.build(
            movie_session_id=movie_session_id, cinema_hall_id=movie_session.cinema_hall_id
        )

    @Logger.io
    async def build(
        self, *, movie_session_id: int, cinema_hall_id: int
    ) -> MergedFullCinemaBookingSeatingSchema:
        cinema_seating_schema = await self.hall_seating_query_repo.get_hall_seating_schema(
            cinema_hall_id=cinema_hall_id
        )
        source_booking_schema = generate_source_booking_schema(cinema_seating_schema)

        booked_seats_positions = (
            await self.booking_query_repo.find_booked_seat_positions_for_movie_session(
                movie_session_id=movie_session_id
            )
        )
        actual_booking_schema = generate_actual_booking_schema(
            source_booking_schema, booked_seats_positions
        )

        return generate_merged_cinema_booking_seating_schema(
            cinema_seating_schema, actual_booking_schema
        )
