from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_menu_item_repo import IMenuItemRepo
from src.service.restaurant.app.interface.i_menu_repo import IMenuRepo
from src.service.restaurant.domain.entity.menu_entity import Menu, MenuItem


class MenuQueryUseCase:
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

    @Logger.io
    async def list_menus(self) -> List[Menu]:
        return await self.menu_repo.list_all()

    @Logger.io
    async def get_menu(self, *, menu_id: UUID) -> Menu:
        menu = await self.menu_repo.get_by_id(menu_id)
        if not menu:
            raise NotFoundError(f'Menu not found with ID: {menu_id}')
        return menu

    @Logger.io
    async def list_items(self) -> List[MenuItem]:
        return await self.menu_item_repo.list_all()

    @Logger.io
    async def get_item(self, *, item_id: UUID) -> MenuItem:
        item = await self.menu_item_repo.get_by_id(item_id)
        if not item:
            raise NotFoundError(f'Menu item not found with ID: {item_id}')
        return item

    @Logger.io
    async def list_items_by_menu(self, *, menu_id: UUID) -> List[MenuItem]:
        await self.get_menu(menu_id=menu_id)
        return await self.menu_item_repo.list_by_menu(menu_id)
