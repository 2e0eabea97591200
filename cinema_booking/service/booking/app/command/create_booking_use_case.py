from typing import List, Self

from fastapi import Depends
from opentelemetry import trace

from cinema_booking.platform.config.core_setting import settings
from cinema_booking.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from cinema_booking.platform.exception.exceptions import NotFoundError, SeatNotInSchemaError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.query.get_booking_seating_schema_use_case import (
    GetBookingSeatingSchemaUseCase,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.pricing_domain import calc_total_price
from cinema_booking.service.booking.domain.seating_schema_domain import select_desired_seats
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition


class CreateBookingUseCase:
    """
    Create booking use case

    Flow (one unit of work, nothing is written until step 6):
    1. Resolve the movie session (NotFound if absent)
    2. Re-derive the merged seating schema from the store
    3. Validate every desired seat against it (all-or-nothing)
    4. Price the seats with the session's multipliers
    5. Resolve booking positions to persisted seat ids
    6. Insert booking + seat associations, then commit

    Two concurrent requests for the same seat can both pass step 3; the
    unique (movie_session_id, seat_id) constraint rejects the loser at
    step 6 with SeatAlreadyBookedError.
    """

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_booking(
        self, *, user_id: int, movie_session_id: int, desired_seats: List[SeatPosition]
    ) -> Booking:
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={
                'booking.user_id': user_id,
                'booking.movie_session_id': movie_session_id,
                'booking.seat_count': len(desired_seats),
            },
        ):
            async with self.uow:
                # Step 1: session
                movie_session = await self.uow.movie_session_query_repo.get_by_id(
                    movie_session_id=movie_session_id
                )
                if not movie_session:
                    raise NotFoundError(f'Movie session {movie_session_id} not found')

                # Step 2-3: fresh schema, fail fast before any write
                merged_schema = await GetBookingSeatingSchemaUseCase(
                    hall_seating_query_repo=self.uow.hall_seating_query_repo,
                    booking_query_repo=self.uow.booking_query_repo,
                    movie_session_query_repo=self.uow.movie_session_query_repo,
                ).build(
                    movie_session_id=movie_session_id,
                    cinema_hall_id=movie_session.cinema_hall_id,
                )
                selected_seats = select_desired_seats(merged_schema, desired_seats)

                # Step 4: price
                multi_factors = await self.uow.movie_session_query_repo.get_multi_factors(
                    movie_session_id=movie_session_id
                )
                total_price = calc_total_price(
                    selected_seats,
                    multi_factors,
                    movie_session,
                    default_factor=settings.DEFAULT_PRICE_FACTOR,
                )

                # Step 5: booking positions -> seat ids
                seat_ids = await self.uow.hall_seating_query_repo.resolve_positions_to_seat_ids(
                    cinema_hall_id=movie_session.cinema_hall_id, positions=desired_seats
                )
                if len(seat_ids) != len(desired_seats):
                    raise SeatNotInSchemaError(
                        f'Could not resolve {len(desired_seats) - len(seat_ids)} '
                        f'seat(s) in hall {movie_session.cinema_hall_id}'
                    )

                # Step 6: atomic write
                booking = Booking.create(
                    user_id=user_id,
                    movie_session_id=movie_session_id,
                    total_price=total_price,
                    currency=movie_session.currency,
                )
                created_booking = await self.uow.booking_command_repo.create_booking_with_seats(
                    booking=booking, seat_ids=seat_ids
                )
                await self.uow.commit()

            Logger.base.info(
                f'🎟️ [CREATE-BOOKING] Booking {created_booking.id} for user {user_id}, '
                f'session {movie_session_id}, {len(seat_ids)} seat(s), '
                f'{created_booking.total_price} {created_booking.currency}'
            )
            return created_booking
