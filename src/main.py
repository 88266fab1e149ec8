"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Reservation Service] Starting up...')

    tracing = TracingConfig(service_name='reservation-service')
    tracing.setup()
    Logger.base.info('📊 [Reservation Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Reservation Service] Dependency injection wired')

    # Fail fast when PostgreSQL is unreachable
    database = container.database()
    await database.connect()
    tracing.instrument_sqlalchemy(engine=database.engine)
    Logger.base.info('🗄️  [Reservation Service] Database connected + instrumented')

    Logger.base.info('✅ [Reservation Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Reservation Service] Shutting down...')

    await database.disconnect()
    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Reservation Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
