from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.restaurant.domain.entity.menu_entity import MenuItem


class IMenuItemRepo(ABC):
    @abstractmethod
    async def create(self, item: MenuItem) -> MenuItem:
        pass

    @abstractmethod
    async def update(self, item: MenuItem) -> MenuItem:
        pass

    @abstractmethod
    async def delete(self, item_id: UUID) -> None:
        pass

    @abstractmethod
    async def get_by_id(self, item_id: UUID) -> Optional[MenuItem]:
        pass

    @abstractmethod
    async def list_all(self) -> List[MenuItem]:
        pass

    @abstractmethod
    async def list_by_menu(self, menu_id: UUID) -> List[MenuItem]:
        pass
