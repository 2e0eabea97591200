import pytest

from cinema_booking.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
)
from cinema_booking.service.booking.app.command.init_hall_seating_use_case import (
    InitHallSeatingUseCase,
)
from test.service.booking.fixtures import FakeUnitOfWork, G, S, V


@pytest.mark.unit
class TestInitHallSeating:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork()
        uow.hall_seating_query_repo.exists.return_value = True
        uow.hall_seating_command_repo.has_seats.return_value = False
        uow.hall_seating_command_repo.create_hall_seats.return_value = []
        return uow

    @pytest.mark.asyncio
    async def test_persists_every_cell_with_booking_coordinates(self, uow: FakeUnitOfWork):
        await InitHallSeatingUseCase(uow=uow).execute(
            cinema_hall_id=3, layout=[[S, G, V], [G, G, G], ['vip', 'couple']]
        )

        call = uow.hall_seating_command_repo.create_hall_seats.await_args
        assert call.kwargs['cinema_hall_id'] == 3
        assert len(call.kwargs['cells']) == 8
        assert [
            (e.row, e.col, e.booking_row, e.booking_col)
            for e in call.kwargs['source_booking_schema']
        ] == [(0, 0, 0, 0), (0, 2, 0, 1), (2, 0, 1, 0), (2, 1, 1, 1)]
        assert uow.committed == 1

    @pytest.mark.asyncio
    async def test_unknown_hall_is_not_found(self, uow: FakeUnitOfWork):
        uow.hall_seating_query_repo.exists.return_value = False

        with pytest.raises(NotFoundError):
            await InitHallSeatingUseCase(uow=uow).execute(cinema_hall_id=3, layout=[[S]])

        uow.hall_seating_command_repo.create_hall_seats.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_finalised_seating_cannot_be_replaced(self, uow: FakeUnitOfWork):
        uow.hall_seating_command_repo.has_seats.return_value = True

        with pytest.raises(ConflictError):
            await InitHallSeatingUseCase(uow=uow).execute(cinema_hall_id=3, layout=[[S]])

        assert uow.committed == 0

    @pytest.mark.parametrize('layout', [[], [[]], [[G, G]]])
    @pytest.mark.asyncio
    async def test_layout_without_bookable_seat_is_rejected(self, uow: FakeUnitOfWork, layout):
        with pytest.raises(DomainError):
            await InitHallSeatingUseCase(uow=uow).execute(cinema_hall_id=3, layout=layout)
