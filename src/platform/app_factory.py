"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.restaurant.driving_adapter.http_controller.auth_controller import (
    router as auth_router,
)
from src.service.restaurant.driving_adapter.http_controller.bill_controller import (
    router as bill_router,
)
from src.service.restaurant.driving_adapter.http_controller.dining_table_controller import (
    router as table_router,
)
from src.service.restaurant.driving_adapter.http_controller.menu_controller import (
    router as menu_router,
)
from src.service.restaurant.driving_adapter.http_controller.menu_item_controller import (
    router as menu_item_router,
)
from src.service.restaurant.driving_adapter.http_controller.reservation_controller import (
    router as reservation_router,
)
from src.service.restaurant.driving_adapter.http_controller.transaction_controller import (
    router as transaction_router,
)
from src.service.restaurant.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Restaurant Management System',
    service_name: str = 'restaurant-service',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig(service_name=service_name)
    tracing_config.instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(auth_router, prefix='/api/auth', tags=['auth'])
    app.include_router(user_router, prefix='/api/user', tags=['user'])
    app.include_router(table_router, prefix='/api/table', tags=['table'])
    app.include_router(reservation_router, prefix='/api/reservation', tags=['reservation'])
    app.include_router(menu_router, prefix='/api/menu', tags=['menu'])
    app.include_router(menu_item_router, prefix='/api/menu_item', tags=['menu_item'])
    app.include_router(bill_router, prefix='/api/bill', tags=['bill'])
    app.include_router(transaction_router, prefix='/api/transaction', tags=['transaction'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
