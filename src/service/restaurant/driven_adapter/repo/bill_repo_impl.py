from typing import AsyncContextManager, Callable, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_bill_repo import IBillRepo
from src.service.restaurant.domain.entity.bill_entity import Bill
from src.service.restaurant.driven_adapter.model.bill_model import BillModel


class BillRepoImpl(IBillRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, bill: Bill) -> Bill:
        async with self.session_factory() as session:
            model = BillModel(
                id=bill.id,
                order_id=bill.order_id,
                total_amount=bill.total_amount,
                tax=bill.tax,
                discount=bill.discount,
                final_amount=bill.final_amount,
            )
            session.add(model)
            await session.flush()
            await session.refresh(model)
            return self._model_to_entity(model)

    @Logger.io
    async def update(self, bill: Bill) -> Bill:
        async with self.session_factory() as session:
            model = await session.get(BillModel, bill.id)
            if not model:
                raise NotFoundError(f'Bill not found with ID: {bill.id}')
            model.order_id = bill.order_id
            model.total_amount = bill.total_amount
            model.tax = bill.tax
            model.discount = bill.discount
            model.final_amount = bill.final_amount
            await session.flush()
            return self._model_to_entity(model)

    @Logger.io
    async def delete(self, bill_id: UUID) -> None:
        async with self.session_factory() as session:
            model = await session.get(BillModel, bill_id)
            if not model:
                raise NotFoundError(f'Bill not found with ID: {bill_id}')
            await session.delete(model)
            await session.flush()

    @Logger.io
    async def get_by_id(self, bill_id: UUID) -> Optional[Bill]:
        async with self.session_factory() as session:
            model = await session.get(BillModel, bill_id)
            return self._model_to_entity(model) if model else None

    @Logger.io
    async def get_by_order_id(self, order_id: UUID) -> Optional[Bill]:
        async with self.session_factory() as session:
            result = await session.execute(select(BillModel).where(BillModel.order_id == order_id))
            model = result.scalar_one_or_none()
            return self._model_to_entity(model) if model else None

    @staticmethod
    def _model_to_entity(model: BillModel) -> Bill:
        return Bill(
            id=model.id,
            order_id=model.order_id,
            total_amount=model.total_amount,
            tax=model.tax,
            discount=model.discount,
            final_amount=model.final_amount,
            created_at=model.created_at,
        )
