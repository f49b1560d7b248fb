from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_dining_table_repo import IDiningTableRepo
from src.service.restaurant.domain.entity.dining_table_entity import DiningTable
from src.service.restaurant.driven_adapter.model.dining_table_model import DiningTableModel


class DiningTableRepoImpl(IDiningTableRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, table: DiningTable) -> DiningTable:
        async with self.session_factory() as session:
            model = DiningTableModel(id=table.id, number=table.number, capacity=table.capacity)
            session.add(model)
            await session.flush()
            return self._model_to_entity(model)

    @Logger.io
    async def get_by_id(self, table_id: UUID) -> Optional[DiningTable]:
        async with self.session_factory() as session:
            model = await session.get(DiningTableModel, table_id)
            return self._model_to_entity(model) if model else None

    @Logger.io
    async def list_all(self) -> List[DiningTable]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(DiningTableModel).order_by(DiningTableModel.number)
            )
            return [self._model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def exists_by_number(self, number: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(DiningTableModel.id).where(DiningTableModel.number == number).limit(1)
            )
            return result.scalar_one_or_none() is not None

    @staticmethod
    def _model_to_entity(model: DiningTableModel) -> DiningTable:
        return DiningTable(id=model.id, number=model.number, capacity=model.capacity)
