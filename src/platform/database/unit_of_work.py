"""
Unit of Work Pattern - one session and one transaction shared by several repositories

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories get the shared session through a session factory bound to the UoW
- Use cases coordinate multi-repository writes through the UoW
  (user deletion cascading to reservations, transaction + bill update)
"""

from __future__ import annotations

import abc
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import Database


if TYPE_CHECKING:
    from src.service.restaurant.app.interface.i_bill_repo import IBillRepo
    from src.service.restaurant.app.interface.i_reservation_command_repo import (
        IReservationCommandRepo,
    )
    from src.service.restaurant.app.interface.i_transaction_repo import ITransactionRepo
    from src.service.restaurant.app.interface.i_user_command_repo import IUserCommandRepo
    from src.service.restaurant.app.interface.i_user_query_repo import IUserQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work

    Usage:
        async with uow:
            await uow.user_command_repo.update(user)
            await uow.reservation_command_repo.detach_user(user_id=user.id)
            await uow.commit()

    Leaving the block without commit() rolls everything back.
    """

    user_command_repo: IUserCommandRepo
    user_query_repo: IUserQueryRepo
    reservation_command_repo: IReservationCommandRepo
    bill_repo: IBillRepo
    transaction_repo: ITransactionRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, database: Database):
        self.database = database
        self.session: Optional[AsyncSession] = None

    @asynccontextmanager
    async def _shared_session(self) -> AsyncIterator[AsyncSession]:
        # Repositories flush only; the UoW decides when to commit
        if self.session is None:
            raise RuntimeError('Unit of work used outside of "async with"')
        yield self.session

    async def __aenter__(self):
        from src.service.restaurant.driven_adapter.repo.bill_repo_impl import BillRepoImpl
        from src.service.restaurant.driven_adapter.repo.reservation_command_repo_impl import (
            ReservationCommandRepoImpl,
        )
        from src.service.restaurant.driven_adapter.repo.transaction_repo_impl import (
            TransactionRepoImpl,
        )
        from src.service.restaurant.driven_adapter.repo.user_command_repo_impl import (
            UserCommandRepoImpl,
        )
        from src.service.restaurant.driven_adapter.repo.user_query_repo_impl import (
            UserQueryRepoImpl,
        )
        from src.service.restaurant.driven_adapter.security.bcrypt_password_hasher import (
            BcryptPasswordHasher,
        )

        self.session = self.database.new_session()

        self.user_command_repo = UserCommandRepoImpl(session_factory=self._shared_session)
        self.user_query_repo = UserQueryRepoImpl(
            session_factory=self._shared_session, password_hasher=BcryptPasswordHasher()
        )
        self.reservation_command_repo = ReservationCommandRepoImpl(
            session_factory=self._shared_session
        )
        self.bill_repo = BillRepoImpl(session_factory=self._shared_session)
        self.transaction_repo = TransactionRepoImpl(session_factory=self._shared_session)

        return await super().__aenter__()

    async def __aexit__(self, *args):
        try:
            await super().__aexit__(*args)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self):
        if self.session is None:
            raise RuntimeError('Unit of work used outside of "async with"')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
