from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_transaction_repo import ITransactionRepo
from src.service.restaurant.domain.entity.transaction_entity import Transaction


class TransactionQueryUseCase:
    def __init__(self, *, transaction_repo: ITransactionRepo) -> None:
        self.transaction_repo = transaction_repo

    @classmethod
    @inject
    def depends(
        cls,
        transaction_repo: ITransactionRepo = Depends(Provide[Container.transaction_repo]),
    ) -> Self:
        return cls(transaction_repo=transaction_repo)

    @Logger.io
    async def list_transactions(self) -> List[Transaction]:
        return await self.transaction_repo.list_all()

    @Logger.io
    async def get_transaction(self, *, transaction_id: UUID) -> Transaction:
        transaction = await self.transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError(f'Transaction not found with ID: {transaction_id}')
        return transaction

    @Logger.io
    async def list_by_bill(self, *, bill_id: UUID) -> List[Transaction]:
        return await self.transaction_repo.list_by_bill(bill_id)
