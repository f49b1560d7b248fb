from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_menu_repo import IMenuRepo
from src.service.restaurant.domain.entity.menu_entity import Menu
from src.service.restaurant.driven_adapter.model.menu_model import MenuModel
from src.service.restaurant.driven_adapter.repo.menu_item_repo_impl import menu_item_model_to_entity


class MenuRepoImpl(IMenuRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, menu: Menu) -> Menu:
        async with self.session_factory() as session:
            model = MenuModel(id=menu.id, name=menu.name, items=[])
            session.add(model)
            await session.flush()
            return self._model_to_entity(model)

    @Logger.io
    async def update(self, menu: Menu) -> Menu:
        async with self.session_factory() as session:
            model = await session.get(MenuModel, menu.id)
            if not model:
                raise NotFoundError('Menu not found')
            model.name = menu.name
            await session.flush()
            return self._model_to_entity(model)

    @Logger.io
    async def delete(self, menu_id: UUID) -> None:
        async with self.session_factory() as session:
            model = await session.get(MenuModel, menu_id)
            if not model:
                raise NotFoundError('Menu not found')
            await session.delete(model)
            await session.flush()

    @Logger.io
    async def get_by_id(self, menu_id: UUID) -> Optional[Menu]:
        async with self.session_factory() as session:
            model = await session.get(MenuModel, menu_id)
            return self._model_to_entity(model) if model else None

    @Logger.io
    async def list_all(self) -> List[Menu]:
        async with self.session_factory() as session:
            result = await session.execute(select(MenuModel).order_by(MenuModel.name))
            return [self._model_to_entity(m) for m in result.scalars().all()]

    @staticmethod
    def _model_to_entity(model: MenuModel) -> Menu:
        return Menu(
            id=model.id,
            name=model.name,
            items=[menu_item_model_to_entity(item) for item in model.items],
        )
