"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from cinema_booking.platform.config.core_setting import Settings
from cinema_booking.platform.database.orm_db_setting import Database
from cinema_booking.service.booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from cinema_booking.service.booking.driven_adapter.repo.cinema_hall_seating_query_repo_impl import (
    CinemaHallSeatingQueryRepoImpl,
)
from cinema_booking.service.booking.driven_adapter.repo.movie_session_query_repo_impl import (
    MovieSessionQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (session factory over the global AsyncEngineManager)
    database = providers.Singleton(Database)

    # Read-side repositories (stateless - open a session per call)
    # Write paths go through the unit of work instead
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    hall_seating_query_repo = providers.Singleton(
        CinemaHallSeatingQueryRepoImpl, session_factory=database.provided.session
    )
    movie_session_query_repo = providers.Singleton(
        MovieSessionQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
