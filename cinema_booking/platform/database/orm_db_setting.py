"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: event-loop-aware engine/session maker cache
2. Base: declarative base for all ORM models
3. get_async_session: FastAPI dependency yielding a request-scoped session
4. Database: session factory for repositories and the DI container

Every booking or cancellation request runs inside one short-lived session;
no ORM state is kept between requests.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from cinema_booking.platform.config.core_setting import settings
from cinema_booking.platform.logging.loguru_io import Logger


class AsyncEngineManager:
    """
    Keeps one AsyncEngine per running event loop.

    Engines bound to a loop that has since closed raise "attached to a
    different loop" errors, which happens under test runners that create a
    fresh loop per test.
    """

    def __init__(self, url: str | None = None) -> None:
        self._url = url
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def url(self) -> str:
        return self._url or settings.DATABASE_URL_ASYNC

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if self._engine is None or (current_loop is not None and self._loop is not current_loop):
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, recreating engine')
            self._engine = create_engine_for_url(self.url)
            self._session_maker = None
            self._loop = current_loop

        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None


def create_engine_for_url(url: str) -> AsyncEngine:
    """
    Create an async engine; pool tuning only applies to server databases.

    SQLite connections get foreign keys switched on, which SQLite leaves off
    by default.
    """
    kwargs: dict[str, Any] = {'echo': False, 'future': True}
    is_sqlite = make_url(url).get_backend_name() == 'sqlite'
    if not is_sqlite:
        kwargs |= {
            'pool_size': settings.DB_POOL_SIZE,
            'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
            'pool_timeout': settings.DB_POOL_TIMEOUT,
            'pool_recycle': settings.DB_POOL_RECYCLE,
            'pool_pre_ping': settings.DB_POOL_PRE_PING,
        }

    engine = create_async_engine(url, **kwargs)

    if is_sqlite:

        @event.listens_for(engine.sync_engine, 'connect')
        def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute('PRAGMA foreign_keys=ON')
            cursor.close()

    Logger.base.info(f'🔗 [DB] Engine created for {make_url(url).render_as_string()}')
    return engine


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


class Base(DeclarativeBase):
    pass


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist (local runs; deployments use alembic)"""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide async session for FastAPI dependency injection

    The session maker context manager closes the session and rolls back
    anything left uncommitted.
    """
    async with get_session_maker()() as session:
        yield session


class Database:
    """Session factory handed to repositories (`session_factory=database.provided.session`)"""

    def __init__(self, *, engine_manager: AsyncEngineManager | None = None) -> None:
        self._engine_manager = engine_manager or _engine_manager

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._engine_manager.get_session_maker()() as session:
            yield session


async def dispose_engine() -> None:
    await _engine_manager.dispose()
