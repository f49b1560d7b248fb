from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.restaurant.domain.entity.bill_entity import Bill


class IBillRepo(ABC):
    @abstractmethod
    async def create(self, bill: Bill) -> Bill:
        pass

    @abstractmethod
    async def update(self, bill: Bill) -> Bill:
        pass

    @abstractmethod
    async def delete(self, bill_id: UUID) -> None:
        pass

    @abstractmethod
    async def get_by_id(self, bill_id: UUID) -> Optional[Bill]:
        pass

    @abstractmethod
    async def get_by_order_id(self, order_id: UUID) -> Optional[Bill]:
        pass
