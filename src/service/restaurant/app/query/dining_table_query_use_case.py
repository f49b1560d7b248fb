from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_dining_table_repo import IDiningTableRepo
from src.service.restaurant.domain.entity.dining_table_entity import DiningTable


class DiningTableQueryUseCase:
    def __init__(self, *, dining_table_repo: IDiningTableRepo) -> None:
        self.dining_table_repo = dining_table_repo

    @classmethod
    @inject
    def depends(
        cls,
        dining_table_repo: IDiningTableRepo = Depends(Provide[Container.dining_table_repo]),
    ) -> Self:
        return cls(dining_table_repo=dining_table_repo)

    @Logger.io
    async def list_tables(self) -> List[DiningTable]:
        return await self.dining_table_repo.list_all()

    @Logger.io
    async def get_table(self, *, table_id: UUID) -> DiningTable:
        table = await self.dining_table_repo.get_by_id(table_id)
        if not table:
            raise NotFoundError(f'Table not found with ID: {table_id}')
        return table
