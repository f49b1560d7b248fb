from decimal import Decimal
from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_menu_item_repo import IMenuItemRepo
from src.service.restaurant.app.interface.i_menu_repo import IMenuRepo
from src.service.restaurant.domain.entity.menu_entity import Menu, MenuItem


class MenuCommandUseCase:
    """Menus and their items. Both are hard-deleted; deleting a menu deletes its items."""

    def __init__(self, *, menu_repo: IMenuRepo, menu_item_repo: IMenuItemRepo) -> None:
        self.menu_repo = menu_repo
        self.menu_item_repo = menu_item_repo

    @classmethod
    @inject
    def depends(
        cls,
        menu_repo: IMenuRepo = Depends(Provide[Container.menu_repo]),
        menu_item_repo: IMenuItemRepo = Depends(Provide[Container.menu_item_repo]),
    ) -> Self:
        return cls(menu_repo=menu_repo, menu_item_repo=menu_item_repo)

    async def _ensure_menu(self, menu_id: UUID) -> Menu:
        menu = await self.menu_repo.get_by_id(menu_id)
        if not menu:
            raise NotFoundError(f'Menu not found with ID: {menu_id}')
        return menu

    async def _ensure_item(self, item_id: UUID) -> MenuItem:
        item = await self.menu_item_repo.get_by_id(item_id)
        if not item:
            raise NotFoundError(f'Menu item not found with ID: {item_id}')
        return item

    # ========== Menu ==========

    @Logger.io
    async def create_menu(self, *, name: str) -> Menu:
        return await self.menu_repo.create(Menu.create(name=name))

    @Logger.io
    async def rename_menu(self, *, menu_id: UUID, name: str) -> Menu:
        menu = await self._ensure_menu(menu_id)
        menu.rename(name)
        return await self.menu_repo.update(menu)

    @Logger.io
    async def delete_menu(self, *, menu_id: UUID) -> None:
        await self._ensure_menu(menu_id)
        await self.menu_repo.delete(menu_id)
        Logger.base.info(f'🗑️ [MENU] Deleted menu {menu_id} with its items')

    # ========== Menu Item ==========

    @Logger.io
    async def create_item(
        self,
        *,
        menu_id: UUID,
        name: str,
        price: Decimal,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> MenuItem:
        await self._ensure_menu(menu_id)
        item = MenuItem.create(
            menu_id=menu_id,
            name=name,
            price=price,
            description=description,
            category=category,
        )
        return await self.menu_item_repo.create(item)

    @Logger.io
    async def update_item(
        self,
        *,
        item_id: UUID,
        menu_id: UUID,
        name: str,
        price: Decimal,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> MenuItem:
        item = await self._ensure_item(item_id)
        if menu_id != item.menu_id:
            await self._ensure_menu(menu_id)

        item.apply_changes(
            menu_id=menu_id,
            name=name,
            price=price,
            description=description,
            category=category,
        )
        return await self.menu_item_repo.update(item)

    @Logger.io
    async def delete_item(self, *, item_id: UUID) -> None:
        await self._ensure_item(item_id)
        await self.menu_item_repo.delete(item_id)
