from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_dining_table_repo import IDiningTableRepo
from src.service.restaurant.domain.entity.dining_table_entity import DiningTable


class DiningTableCommandUseCase:
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
    async def create_table(self, *, number: int, capacity: int) -> DiningTable:
        if await self.dining_table_repo.exists_by_number(number):
            raise ConflictError(f'Table number {number} already exists.')

        table = DiningTable.create(number=number, capacity=capacity)
        return await self.dining_table_repo.create(table)
