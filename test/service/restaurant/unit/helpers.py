from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from unittest.mock import AsyncMock, Mock
from uuid import UUID, uuid4

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.restaurant.domain.entity.bill_entity import Bill
from src.service.restaurant.domain.entity.dining_table_entity import DiningTable
from src.service.restaurant.domain.entity.menu_entity import Menu, MenuItem
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.entity.user_entity import UserEntity, UserRole


async def _return_entity(entity: Any, *args: Any, **kwargs: Any) -> Any:
    """Mock: Return entity as-is (simulates successful persistence)"""
    return entity


class RepositoryMocks:
    def __init__(
        self,
        *,
        user: Optional[UserEntity] = None,
        reservation: Optional[Reservation] = None,
        table: Optional[DiningTable] = None,
        bill: Optional[Bill] = None,
        menu: Optional[Menu] = None,
        menu_item: Optional[MenuItem] = None,
    ) -> None:
        """
        Initialize mock repositories with test data

        Args:
            user: User returned by get_by_id / get_by_email
            reservation: Reservation returned by get_by_id
            table: Table returned by get_by_id
            bill: Bill returned by get_by_id
            menu: Menu returned by get_by_id
            menu_item: Menu item returned by get_by_id
        """
        # User repos
        self.user_command_repo: Mock = AsyncMock()
        self.user_command_repo.create = AsyncMock(side_effect=_return_entity)
        self.user_command_repo.update = AsyncMock(side_effect=_return_entity)

        self.user_query_repo: Mock = AsyncMock()
        self.user_query_repo.get_by_id = AsyncMock(return_value=user)
        self.user_query_repo.get_by_email = AsyncMock(return_value=user)
        self.user_query_repo.exists_by_email = AsyncMock(return_value=False)

        # Reservation repos
        self.reservation_command_repo: Mock = AsyncMock()
        self.reservation_command_repo.create = AsyncMock(side_effect=_return_entity)
        self.reservation_command_repo.update = AsyncMock(side_effect=_return_entity)
        self.reservation_command_repo.detach_user = AsyncMock(return_value=0)

        self.reservation_query_repo: Mock = AsyncMock()
        self.reservation_query_repo.get_by_id = AsyncMock(return_value=reservation)
        self.reservation_query_repo.exists_for_table_between = AsyncMock(return_value=False)
        self.reservation_query_repo.exists_for_user_at = AsyncMock(return_value=False)
        self.reservation_query_repo.exists_for_guest_email_at = AsyncMock(return_value=False)

        # Table repo
        self.dining_table_repo: Mock = AsyncMock()
        self.dining_table_repo.get_by_id = AsyncMock(return_value=table)
        self.dining_table_repo.exists_by_number = AsyncMock(return_value=False)
        self.dining_table_repo.create = AsyncMock(side_effect=_return_entity)

        # Menu repos
        self.menu_repo: Mock = AsyncMock()
        self.menu_repo.get_by_id = AsyncMock(return_value=menu)
        self.menu_repo.create = AsyncMock(side_effect=_return_entity)
        self.menu_repo.update = AsyncMock(side_effect=_return_entity)

        self.menu_item_repo: Mock = AsyncMock()
        self.menu_item_repo.get_by_id = AsyncMock(return_value=menu_item)
        self.menu_item_repo.create = AsyncMock(side_effect=_return_entity)
        self.menu_item_repo.update = AsyncMock(side_effect=_return_entity)

        # Payment repos
        self.bill_repo: Mock = AsyncMock()
        self.bill_repo.get_by_id = AsyncMock(return_value=bill)
        self.bill_repo.get_by_order_id = AsyncMock(return_value=None)
        self.bill_repo.create = AsyncMock(side_effect=_return_entity)
        self.bill_repo.update = AsyncMock(side_effect=_return_entity)

        self.transaction_repo: Mock = AsyncMock()
        self.transaction_repo.create = AsyncMock(side_effect=_return_entity)


class FakeUnitOfWork(AbstractUnitOfWork):
    """Unit of work over the mocked repositories, records whether commit was reached"""

    def __init__(self, mocks: RepositoryMocks) -> None:
        self.user_command_repo = mocks.user_command_repo
        self.user_query_repo = mocks.user_query_repo
        self.reservation_command_repo = mocks.reservation_command_repo
        self.bill_repo = mocks.bill_repo
        self.transaction_repo = mocks.transaction_repo
        self.committed = False

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass


def make_password_hasher() -> Mock:
    hasher = Mock()
    hasher.hash_password.side_effect = lambda *, plain_password: (
        f'hashed::{plain_password.get_secret_value()}'
    )
    hasher.verify_password.side_effect = lambda *, plain_password, hashed_password: (
        hashed_password == f'hashed::{plain_password.get_secret_value()}'
    )
    return hasher


def make_user(
    *,
    role: UserRole = UserRole.CUSTOMER,
    email: str = 'diner@example.com',
    is_active: bool = True,
) -> UserEntity:
    return UserEntity(
        id=uuid4(),
        email=email,
        name='Diner',
        hashed_password='hashed::secret123',
        role=role,
        is_active=is_active,
    )


def make_table(*, number: int = 1, capacity: int = 4) -> DiningTable:
    return DiningTable(id=uuid4(), number=number, capacity=capacity)


def make_reservation(
    *,
    reservation_time: datetime,
    table_id: Optional[UUID] = None,
    user_id: Optional[UUID] = None,
    guest_email: Optional[str] = None,
) -> Reservation:
    return Reservation(
        id=uuid4(),
        table_id=table_id or uuid4(),
        reservation_time=reservation_time,
        number_of_guests=2,
        user_id=user_id,
        guest_name=None if user_id else 'Walk In',
        guest_email=None if user_id else (guest_email or 'walkin@example.com'),
    )


def make_bill(
    *,
    total: str = '100.00',
    tax: str = '10.00',
    discount: str = '0.00',
) -> Bill:
    return Bill.create(
        order_id=uuid4(),
        total_amount=Decimal(total),
        tax=Decimal(tax),
        discount=Decimal(discount),
    )
