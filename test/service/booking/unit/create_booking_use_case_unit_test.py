"""
Unit tests for CreateBookingUseCase

Test Focus:
1. Happy path: price from multipliers, seats resolved, one atomic write, commit
2. Fail Fast: missing session, unknown seat, already booked seat -> no write
3. Store conflict: unique-constraint loser surfaces SeatAlreadyBookedError, no commit
"""

from datetime import datetime, timezone
from decimal import Decimal

import attrs
import pytest

from cinema_booking.platform.config.core_setting import settings
from cinema_booking.platform.exception.exceptions import (
    NotFoundError,
    PriceFactorMissingError,
    SeatAlreadyBookedError,
    SeatNotInSchemaError,
)
from cinema_booking.service.booking.app.command.create_booking_use_case import (
    CreateBookingUseCase,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition
from test.service.booking.fixtures import (
    FakeUnitOfWork,
    S,
    V,
    build_factor,
    build_hall,
    build_movie_session,
)


def _persisted(booking: Booking, seat_ids: list[int]) -> Booking:
    return attrs.evolve(booking, id=42, created_at=datetime.now(timezone.utc))


@pytest.mark.unit
class TestCreateBooking:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork()
        uow.movie_session_query_repo.get_by_id.return_value = build_movie_session(base_price='10')
        uow.movie_session_query_repo.get_multi_factors.return_value = [build_factor(V, '1.5')]
        uow.hall_seating_query_repo.get_hall_seating_schema.return_value = build_hall([[S, V]])
        uow.booking_query_repo.find_booked_seat_positions_for_movie_session.return_value = []
        uow.hall_seating_query_repo.resolve_positions_to_seat_ids.return_value = [2]
        uow.booking_command_repo.create_booking_with_seats.side_effect = (
            lambda *, booking, seat_ids: _persisted(booking, seat_ids)
        )
        return uow

    @pytest.mark.asyncio
    async def test_books_vip_seat_at_multiplied_price(self, uow: FakeUnitOfWork) -> None:
        """
        Given: hall [(0,0,standard),(0,1,vip)], base price 10, VIP factor 1.5
        When: user books (0,1)
        Then: total 15, seat 2 associated, unit of work committed once
        """
        use_case = CreateBookingUseCase(uow=uow)

        booking = await use_case.create_booking(
            user_id=7, movie_session_id=1, desired_seats=[SeatPosition(row=0, col=1)]
        )

        assert booking.id == 42
        assert booking.total_price == Decimal('15.00')
        assert booking.currency == 'USD'
        assert booking.user_id == 7

        uow.booking_command_repo.create_booking_with_seats.assert_awaited_once()
        call = uow.booking_command_repo.create_booking_with_seats.await_args
        assert call.kwargs['seat_ids'] == [2]
        assert call.kwargs['booking'].total_price == Decimal('15.00')
        assert uow.committed == 1

    @pytest.mark.asyncio
    async def test_unknown_session_is_not_found(self, uow: FakeUnitOfWork) -> None:
        uow.movie_session_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await CreateBookingUseCase(uow=uow).create_booking(
                user_id=7, movie_session_id=99, desired_seats=[SeatPosition(row=0, col=1)]
            )

        uow.booking_command_repo.create_booking_with_seats.assert_not_awaited()
        assert uow.committed == 0

    @pytest.mark.asyncio
    async def test_seat_outside_hall_fails_whole_booking(self, uow: FakeUnitOfWork) -> None:
        with pytest.raises(SeatNotInSchemaError):
            await CreateBookingUseCase(uow=uow).create_booking(
                user_id=7,
                movie_session_id=1,
                desired_seats=[SeatPosition(row=0, col=1), SeatPosition(row=3, col=3)],
            )

        uow.booking_command_repo.create_booking_with_seats.assert_not_awaited()
        assert uow.committed == 0
        assert uow.rolled_back == 1

    @pytest.mark.asyncio
    async def test_already_booked_seat_fails_before_write(self, uow: FakeUnitOfWork) -> None:
        uow.booking_query_repo.find_booked_seat_positions_for_movie_session.return_value = [
            SeatPosition(row=0, col=1)
        ]

        with pytest.raises(SeatAlreadyBookedError):
            await CreateBookingUseCase(uow=uow).create_booking(
                user_id=7, movie_session_id=1, desired_seats=[SeatPosition(row=0, col=1)]
            )

        uow.booking_command_repo.create_booking_with_seats.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unresolvable_seat_fails(self, uow: FakeUnitOfWork) -> None:
        uow.hall_seating_query_repo.resolve_positions_to_seat_ids.return_value = []

        with pytest.raises(SeatNotInSchemaError):
            await CreateBookingUseCase(uow=uow).create_booking(
                user_id=7, movie_session_id=1, desired_seats=[SeatPosition(row=0, col=1)]
            )

        uow.booking_command_repo.create_booking_with_seats.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_loser_gets_conflict_and_nothing_commits(
        self, uow: FakeUnitOfWork
    ) -> None:
        """
        Given: the seat looked free at read time
        When: the seat association insert hits the unique constraint
        Then: SeatAlreadyBookedError propagates, no commit, rollback
        """
        uow.booking_command_repo.create_booking_with_seats.side_effect = SeatAlreadyBookedError(
            'One or more seats were booked by another request'
        )

        with pytest.raises(SeatAlreadyBookedError):
            await CreateBookingUseCase(uow=uow).create_booking(
                user_id=7, movie_session_id=1, desired_seats=[SeatPosition(row=0, col=1)]
            )

        assert uow.committed == 0
        assert uow.rolled_back == 1

    @pytest.mark.asyncio
    async def test_seat_type_without_factor_uses_default(
        self, uow: FakeUnitOfWork, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, 'DEFAULT_PRICE_FACTOR', Decimal('1'))
        uow.hall_seating_query_repo.resolve_positions_to_seat_ids.return_value = [1]

        booking = await CreateBookingUseCase(uow=uow).create_booking(
            user_id=7, movie_session_id=1, desired_seats=[SeatPosition(row=0, col=0)]
        )

        assert booking.total_price == Decimal('10.00')

    @pytest.mark.asyncio
    async def test_seat_type_without_factor_fails_when_no_default(
        self, uow: FakeUnitOfWork, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(settings, 'DEFAULT_PRICE_FACTOR', None)

        with pytest.raises(PriceFactorMissingError):
            await CreateBookingUseCase(uow=uow).create_booking(
                user_id=7, movie_session_id=1, desired_seats=[SeatPosition(row=0, col=0)]
            )

        uow.booking_command_repo.create_booking_with_seats.assert_not_awaited()
