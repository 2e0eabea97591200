"""
HTTP tests for the booking API

The app runs through its real factory, DI container and exception handlers;
only the database is swapped for a per-test SQLite file.
"""

from collections.abc import Iterator
from contextlib import asynccontextmanager
from functools import partial
from pathlib import Path

from dependency_injector import providers
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from cinema_booking.platform.app_factory import create_app
from cinema_booking.platform.config.di import container
from cinema_booking.platform.config.wire_modules import WIRE_MODULES
from cinema_booking.platform.constant.route_constant import BOOKING_PREFIX, HEALTH, USER_ID_HEADER
from cinema_booking.platform.database.orm_db_setting import (
    AsyncEngineManager,
    Database,
    get_async_session,
)
from test.service.booking.fixtures import G, S, V
from test.service.booking.integration.seed import SeededSession, create_schema, seed_movie_session


def _test_lifespan(engine_manager: AsyncEngineManager):
    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        container.database.override(providers.Object(Database(engine_manager=engine_manager)))
        container.reset_singletons()
        container.wire(modules=WIRE_MODULES)
        yield
        container.unwire()
        container.database.reset_override()
        container.reset_singletons()
        await engine_manager.dispose()

    return lifespan


@pytest.fixture
def engine_manager_for_app(tmp_path: Path) -> AsyncEngineManager:
    return AsyncEngineManager(url=f'sqlite+aiosqlite:///{tmp_path / "cinema_booking_api.db"}')


@pytest.fixture
def client(engine_manager_for_app: AsyncEngineManager) -> Iterator[TestClient]:
    app = create_app(lifespan=_test_lifespan(engine_manager_for_app), title_suffix=' (Test)')

    async def _override_session():
        async with engine_manager_for_app.get_session_maker()() as session:
            yield session

    app.dependency_overrides[get_async_session] = _override_session

    with TestClient(app) as test_client:
        # Same event loop as the app, so the engine is shared
        test_client.portal.call(create_schema, engine_manager_for_app)
        yield test_client


@pytest.fixture
def seeded(client: TestClient, engine_manager_for_app: AsyncEngineManager) -> SeededSession:
    """Hall [[standard, gap, vip]], base price 10, VIP x1.5"""
    return client.portal.call(
        partial(
            seed_movie_session,
            engine_manager_for_app,
            layout=[[S, G, V]],
            base_price='10',
            factors={V: '1.5'},
        )
    )


def _headers(user_id: int) -> dict[str, str]:
    return {USER_ID_HEADER: str(user_id)}


def _book(client: TestClient, seeded: SeededSession, seats, *, user_id: int = 7):
    return client.post(
        BOOKING_PREFIX,
        json={'movie_session_id': seeded.movie_session_id, 'seats': seats},
        headers=_headers(user_id),
    )


@pytest.mark.integration
class TestBookingApi:
    def test_health(self, client: TestClient):
        response = client.get(HEALTH)

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_create_booking(self, client: TestClient, seeded: SeededSession):
        response = _book(client, seeded, [{'row': 0, 'col': 1}])

        assert response.status_code == 201
        body = response.json()
        assert body['user_id'] == 7
        assert body['movie_session_id'] == seeded.movie_session_id
        assert float(body['total_price']) == 15.0
        assert body['currency'] == 'USD'

        detail = client.get(f'{BOOKING_PREFIX}/{body["id"]}', headers=_headers(7))
        assert detail.status_code == 200
        assert detail.json()['id'] == body['id']

    def test_other_users_booking_is_forbidden(self, client: TestClient, seeded: SeededSession):
        booking_id = _book(client, seeded, [{'row': 0, 'col': 1}]).json()['id']

        response = client.get(f'{BOOKING_PREFIX}/{booking_id}', headers=_headers(8))

        assert response.status_code == 403
        assert response.json()['code'] == 'ForbiddenError'
        assert client.get(f'{BOOKING_PREFIX}/{booking_id}').status_code == 401

    def test_double_booking_is_conflict(self, client: TestClient, seeded: SeededSession):
        assert _book(client, seeded, [{'row': 0, 'col': 0}]).status_code == 201

        response = _book(client, seeded, [{'row': 0, 'col': 0}], user_id=8)

        assert response.status_code == 409
        assert response.json()['code'] == 'SeatAlreadyBookedError'

    def test_unknown_seat_is_bad_request(self, client: TestClient, seeded: SeededSession):
        response = _book(client, seeded, [{'row': 0, 'col': 5}])

        assert response.status_code == 400
        assert response.json()['code'] == 'SeatNotInSchemaError'

    def test_empty_seat_list_is_rejected(self, client: TestClient, seeded: SeededSession):
        response = _book(client, seeded, [])

        assert response.status_code == 400
        assert response.json()['code'] == 'RequestValidationError'

    def test_missing_user_header_is_unauthorized(self, client: TestClient, seeded: SeededSession):
        response = client.post(
            BOOKING_PREFIX,
            json={'movie_session_id': seeded.movie_session_id, 'seats': [{'row': 0, 'col': 0}]},
        )

        assert response.status_code == 401
        assert response.json()['code'] == 'AuthenticationError'

    def test_seating_marks_booked_seats_and_gaps(self, client: TestClient, seeded: SeededSession):
        _book(client, seeded, [{'row': 0, 'col': 1}])

        response = client.get(f'{BOOKING_PREFIX}/session/{seeded.movie_session_id}/seating')

        assert response.status_code == 200
        cells = {(c['row'], c['col']): c for c in response.json()}
        assert len(cells) == 3
        assert cells[(0, 1)]['type'] == G.value
        assert cells[(0, 1)]['booking_row'] is None
        assert cells[(0, 0)]['is_booked'] is False
        assert cells[(0, 2)]['is_booked'] is True
        assert (cells[(0, 2)]['booking_row'], cells[(0, 2)]['booking_col']) == (0, 1)

    def test_seating_of_unknown_session_is_not_found(self, client: TestClient):
        response = client.get(f'{BOOKING_PREFIX}/session/999/seating')

        assert response.status_code == 404

    def test_availability(self, client: TestClient, seeded: SeededSession):
        _book(client, seeded, [{'row': 0, 'col': 1}])

        response = client.post(
            f'{BOOKING_PREFIX}/session/{seeded.movie_session_id}/availability',
            json={'seats': [{'row': 0, 'col': 0}, {'row': 0, 'col': 1}]},
        )

        assert response.status_code == 200
        assert response.json() == {
            'all_seats_are_available': False,
            'booked_seats': [{'row': 0, 'col': 1}],
        }

    def test_my_bookings(self, client: TestClient, seeded: SeededSession):
        _book(client, seeded, [{'row': 0, 'col': 1}])
        _book(client, seeded, [{'row': 0, 'col': 0}], user_id=8)

        response = client.get(f'{BOOKING_PREFIX}/my_booking', headers=_headers(7))

        assert response.status_code == 200
        bookings = response.json()
        assert len(bookings) == 1
        assert bookings[0]['cinema_hall_id'] == seeded.cinema_hall_id
        assert bookings[0]['seats'] == [{'row': 0, 'col': 1, 'type': V.value}]

    def test_cancel_booking(self, client: TestClient, seeded: SeededSession):
        booking_id = _book(client, seeded, [{'row': 0, 'col': 0}]).json()['id']

        forbidden = client.delete(f'{BOOKING_PREFIX}/{booking_id}', headers=_headers(8))
        assert forbidden.status_code == 403

        response = client.delete(f'{BOOKING_PREFIX}/{booking_id}', headers=_headers(7))
        assert response.status_code == 200
        assert response.json()['id'] == booking_id

        assert client.get(f'{BOOKING_PREFIX}/{booking_id}', headers=_headers(7)).status_code == 404
        # The seat can be booked again
        assert _book(client, seeded, [{'row': 0, 'col': 0}], user_id=8).status_code == 201

    def test_cancel_unknown_booking_is_not_found(self, client: TestClient):
        response = client.delete(f'{BOOKING_PREFIX}/999', headers=_headers(7))

        assert response.status_code == 404
        assert response.json()['code'] == 'NotFoundError'

    def test_cancel_all_for_session(self, client: TestClient, seeded: SeededSession):
        _book(client, seeded, [{'row': 0, 'col': 0}])
        _book(client, seeded, [{'row': 0, 'col': 1}])

        response = client.delete(
            f'{BOOKING_PREFIX}/session/{seeded.movie_session_id}', headers=_headers(7)
        )

        assert response.status_code == 200
        assert response.json() == {'count': 2}
