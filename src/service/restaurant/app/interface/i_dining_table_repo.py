from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.restaurant.domain.entity.dining_table_entity import DiningTable


class IDiningTableRepo(ABC):
    @abstractmethod
    async def create(self, table: DiningTable) -> DiningTable:
        pass

    @abstractmethod
    async def get_by_id(self, table_id: UUID) -> Optional[DiningTable]:
        pass

    @abstractmethod
    async def list_all(self) -> List[DiningTable]:
        pass

    @abstractmethod
    async def exists_by_number(self, number: int) -> bool:
        pass
