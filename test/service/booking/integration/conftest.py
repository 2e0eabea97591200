from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from cinema_booking.platform.database.orm_db_setting import AsyncEngineManager, Database
from test.service.booking.integration.seed import create_schema


@pytest.fixture
async def engine_manager(tmp_path: Path) -> AsyncGenerator[AsyncEngineManager, None]:
    """Fresh file-backed SQLite database per test (shared across connections, unlike :memory:)"""
    manager = AsyncEngineManager(url=f'sqlite+aiosqlite:///{tmp_path / "cinema_booking_test.db"}')
    await create_schema(manager)
    yield manager
    await manager.dispose()


@pytest.fixture
def database(engine_manager: AsyncEngineManager) -> Database:
    return Database(engine_manager=engine_manager)
