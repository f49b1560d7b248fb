from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_transaction_repo import ITransactionRepo
from src.service.restaurant.domain.entity.transaction_entity import Transaction
from src.service.restaurant.driven_adapter.model.transaction_model import TransactionModel


class TransactionRepoImpl(ITransactionRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, transaction: Transaction) -> Transaction:
        async with self.session_factory() as session:
            model = TransactionModel(
                id=transaction.id,
                bill_id=transaction.bill_id,
                amount=transaction.amount,
                payment_method=transaction.payment_method,
            )
            session.add(model)
            await session.flush()
            await session.refresh(model)
            return self._model_to_entity(model)

    @Logger.io
    async def get_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        async with self.session_factory() as session:
            model = await session.get(TransactionModel, transaction_id)
            return self._model_to_entity(model) if model else None

    @Logger.io
    async def list_all(self) -> List[Transaction]:
        async with self.session_factory() as session:
            result = await session.execute(select(TransactionModel).order_by(TransactionModel.id))
            return [self._model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def list_by_bill(self, bill_id: UUID) -> List[Transaction]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TransactionModel)
                .where(TransactionModel.bill_id == bill_id)
                .order_by(TransactionModel.id)
            )
            return [self._model_to_entity(m) for m in result.scalars().all()]

    @staticmethod
    def _model_to_entity(model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            bill_id=model.bill_id,
            amount=model.amount,
            payment_method=model.payment_method,
            created_at=model.created_at,
        )
