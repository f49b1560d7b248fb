"""
API test configuration

The real app factory is used with every repository provider of the DI
container overridden by an in-memory adapter; the lifespan only wires DI
(no database engine, no tracing exporter).
"""

from collections.abc import AsyncIterator, Callable, Generator
from contextlib import asynccontextmanager

from dependency_injector import providers
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.service.restaurant.domain.entity.dining_table_entity import DiningTable
from src.service.restaurant.domain.entity.user_entity import UserEntity, UserRole
from test.service.restaurant.api.in_memory_repos import (
    InMemoryBillRepo,
    InMemoryDiningTableRepo,
    InMemoryMenuItemRepo,
    InMemoryMenuRepo,
    InMemoryReservationCommandRepo,
    InMemoryReservationQueryRepo,
    InMemoryStore,
    InMemoryTransactionRepo,
    InMemoryUnitOfWork,
    InMemoryUserCommandRepo,
    InMemoryUserQueryRepo,
    PlainPasswordHasher,
)


DEFAULT_PASSWORD = 'P@ssw0rd'


@asynccontextmanager
async def _test_lifespan(app: FastAPI) -> AsyncIterator[None]:
    container.wire(modules=WIRE_MODULES)
    yield
    container.unwire()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(store: InMemoryStore) -> Generator[TestClient, None, None]:
    hasher = PlainPasswordHasher()
    container.reset_singletons()

    overrides = [
        (container.password_hasher, providers.Object(hasher)),
        (container.user_command_repo, providers.Object(InMemoryUserCommandRepo(store))),
        (container.user_query_repo, providers.Object(InMemoryUserQueryRepo(store, hasher))),
        (
            container.reservation_command_repo,
            providers.Object(InMemoryReservationCommandRepo(store)),
        ),
        (container.reservation_query_repo, providers.Object(InMemoryReservationQueryRepo(store))),
        (container.dining_table_repo, providers.Object(InMemoryDiningTableRepo(store))),
        (container.menu_repo, providers.Object(InMemoryMenuRepo(store))),
        (container.menu_item_repo, providers.Object(InMemoryMenuItemRepo(store))),
        (container.bill_repo, providers.Object(InMemoryBillRepo(store))),
        (container.transaction_repo, providers.Object(InMemoryTransactionRepo(store))),
        (
            container.unit_of_work,
            providers.Factory(InMemoryUnitOfWork, store=store, password_hasher=hasher),
        ),
    ]
    for provider, override in overrides:
        provider.override(override)

    app = create_app(lifespan=_test_lifespan, title_suffix=' (Test)')
    with TestClient(app) as test_client:
        yield test_client

    container.reset_override()
    container.reset_singletons()


@pytest.fixture
def login_as(
    client: TestClient, store: InMemoryStore
) -> Callable[..., tuple[UserEntity, dict[str, str]]]:
    """Store a user and return it with a Bearer header for it"""

    def _login(
        role: UserRole = UserRole.CUSTOMER, *, email: str | None = None
    ) -> tuple[UserEntity, dict[str, str]]:
        user = UserEntity.create(
            email=email or f'{role.value}@example.com', name=role.value.title(), role=role
        )
        user.hashed_password = f'plain::{DEFAULT_PASSWORD}'
        store.users[user.id] = user
        token = container.jwt_auth().create_jwt_token(user)
        return user, {'Authorization': f'Bearer {token}'}

    return _login


@pytest.fixture
def table(store: InMemoryStore) -> DiningTable:
    table = DiningTable.create(number=1, capacity=4)
    store.tables[table.id] = table
    return table


@pytest.fixture
def other_table(store: InMemoryStore) -> DiningTable:
    table = DiningTable.create(number=2, capacity=2)
    store.tables[table.id] = table
    return table
