"""
Integration fixtures

Repositories run against a real PostgreSQL database (POSTGRES_* settings, test
database `restaurant_test_db`). The database is created when missing, the schema
is rebuilt for every test and the tables are truncated afterwards. Tests are
skipped when no server is reachable.
"""

from typing import AsyncIterator

import pytest
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import AsyncEngineManager, Base, Database


async def _ensure_test_database() -> None:
    db_url = make_url(settings.DATABASE_URL_ASYNC)
    engine = create_async_engine(db_url.set(database='postgres'), isolation_level='AUTOCOMMIT')
    try:
        async with engine.connect() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': db_url.database},
            )
            if not result.fetchone():
                await conn.execute(text(f'CREATE DATABASE "{db_url.database}"'))
    finally:
        await engine.dispose()


async def _clean_all_tables(manager: AsyncEngineManager) -> None:
    tables = ', '.join(f'"{table.name}"' for table in Base.metadata.sorted_tables)
    async with manager.get_engine().begin() as conn:
        await conn.execute(text(f'TRUNCATE {tables} RESTART IDENTITY CASCADE'))


@pytest.fixture
async def database() -> AsyncIterator[Database]:
    # Register every model on Base.metadata
    import src.service.restaurant.driven_adapter.model  # noqa: F401

    manager = AsyncEngineManager(database_url=settings.DATABASE_URL_ASYNC)
    try:
        await _ensure_test_database()
        async with manager.get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        await manager.dispose()
        pytest.skip(f'PostgreSQL not reachable: {e}')

    try:
        yield Database(engine_manager=manager)
    finally:
        await _clean_all_tables(manager)
        await manager.dispose()
