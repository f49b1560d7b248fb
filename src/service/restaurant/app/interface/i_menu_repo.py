from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.restaurant.domain.entity.menu_entity import Menu


class IMenuRepo(ABC):
    @abstractmethod
    async def create(self, menu: Menu) -> Menu:
        pass

    @abstractmethod
    async def update(self, menu: Menu) -> Menu:
        pass

    @abstractmethod
    async def delete(self, menu_id: UUID) -> None:
        """Hard delete, items of the menu go with it."""
        pass

    @abstractmethod
    async def get_by_id(self, menu_id: UUID) -> Optional[Menu]:
        """Menu with its items loaded."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Menu]:
        pass
