"""
Cinema Booking Service - Main Application

uvicorn cinema_booking.main:app
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from cinema_booking.platform.app_factory import create_app
from cinema_booking.platform.config.core_setting import settings
from cinema_booking.platform.config.di import cleanup, container, setup
from cinema_booking.platform.config.wire_modules import WIRE_MODULES
from cinema_booking.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
)
from cinema_booking.platform.logging.loguru_io import Logger
import cinema_booking.service.booking.driven_adapter.model  # noqa: F401  (registers tables on Base)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifespan: startup and shutdown"""
    Logger.base.info('🚀 [Cinema Booking] Starting up...')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Cinema Booking] Dependency injection wired')

    if settings.DEBUG:
        # Local runs only; deployments apply alembic migrations
        await create_db_and_tables()
        Logger.base.info('🗄️ [Cinema Booking] Database tables ensured')

    yield

    Logger.base.info('🛑 [Cinema Booking] Shutting down...')
    container.unwire()
    cleanup()
    await dispose_engine()


app = create_app(lifespan=lifespan)
