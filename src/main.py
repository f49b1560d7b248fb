"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.restaurant.app.command.user_command_use_case import UserCommandUseCase


async def _bootstrap_admin() -> None:
    if not (settings.FIRST_ADMIN_EMAIL and settings.FIRST_ADMIN_PASSWORD):
        return
    use_case = UserCommandUseCase(
        user_command_repo=container.user_command_repo(),
        user_query_repo=container.user_query_repo(),
        password_hasher=container.password_hasher(),
        uow=container.unit_of_work(),
    )
    await use_case.ensure_admin(
        email=settings.FIRST_ADMIN_EMAIL,
        password=settings.FIRST_ADMIN_PASSWORD.get_secret_value(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Restaurant Service] Starting up...')

    tracing = TracingConfig(service_name='restaurant-service')
    tracing.setup()
    Logger.base.info('📊 [Restaurant Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Restaurant Service] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    await create_db_and_tables()
    Logger.base.info('🗄️  [Restaurant Service] Database engine ready + tables ensured')

    await _bootstrap_admin()

    Logger.base.info('✅ [Restaurant Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Restaurant Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Restaurant Service] Database engine disposed')

    # Flush remaining spans
    tracing.shutdown()

    container.unwire()

    Logger.base.info('👋 [Restaurant Service] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description=(
        'Restaurant Management System - menus, tables, reservations, bills, '
        'payments and user accounts'
    ),
)


@app.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
