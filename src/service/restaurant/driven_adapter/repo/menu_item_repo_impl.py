from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_menu_item_repo import IMenuItemRepo
from src.service.restaurant.domain.entity.menu_entity import MenuItem
from src.service.restaurant.driven_adapter.model.menu_model import MenuItemModel


def menu_item_model_to_entity(model: MenuItemModel) -> MenuItem:
    return MenuItem(
        id=model.id,
        menu_id=model.menu_id,
        name=model.name,
        description=model.description,
        price=model.price,
        category=model.category,
    )


class MenuItemRepoImpl(IMenuItemRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, item: MenuItem) -> MenuItem:
        async with self.session_factory() as session:
            model = MenuItemModel(
                id=item.id,
                menu_id=item.menu_id,
                name=item.name,
                description=item.description,
                price=item.price,
                category=item.category,
            )
            session.add(model)
            await session.flush()
            return menu_item_model_to_entity(model)

    @Logger.io
    async def update(self, item: MenuItem) -> MenuItem:
        async with self.session_factory() as session:
            model = await session.get(MenuItemModel, item.id)
            if not model:
                raise NotFoundError('Menu item not found')
            model.menu_id = item.menu_id
            model.name = item.name
            model.description = item.description
            model.price = item.price
            model.category = item.category
            await session.flush()
            return menu_item_model_to_entity(model)

    @Logger.io
    async def delete(self, item_id: UUID) -> None:
        async with self.session_factory() as session:
            model = await session.get(MenuItemModel, item_id)
            if not model:
                raise NotFoundError('Menu item not found')
            await session.delete(model)
            await session.flush()

    @Logger.io
    async def get_by_id(self, item_id: UUID) -> Optional[MenuItem]:
        async with self.session_factory() as session:
            model = await session.get(MenuItemModel, item_id)
            return menu_item_model_to_entity(model) if model else None

    @Logger.io
    async def list_all(self) -> List[MenuItem]:
        async with self.session_factory() as session:
            result = await session.execute(select(MenuItemModel).order_by(MenuItemModel.name))
            return [menu_item_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def list_by_menu(self, menu_id: UUID) -> List[MenuItem]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(MenuItemModel)
                .where(MenuItemModel.menu_id == menu_id)
                .order_by(MenuItemModel.name)
            )
            return [menu_item_model_to_entity(m) for m in result.scalars().all()]
