from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.restaurant.domain.entity.user_entity import UserEntity
from src.service.restaurant.driven_adapter.model.user_model import UserModel
from src.service.restaurant.driven_adapter.repo.user_query_repo_impl import user_model_to_entity


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                id=user_entity.id,
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                name=user_entity.name,
                role=user_entity.role.value,
                is_active=user_entity.is_active,
                deleted=user_entity.deleted,
            )

            session.add(user_model)
            await session.flush()
            await session.refresh(user_model)

            return user_model_to_entity(user_model)

    @Logger.io
    async def update(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_entity.id)
            if not user_model:
                raise NotFoundError('User not found')

            user_model.email = user_entity.email
            user_model.name = user_entity.name
            user_model.hashed_password = user_entity.hashed_password
            user_model.role = user_entity.role.value
            user_model.is_active = user_entity.is_active
            user_model.deleted = user_entity.deleted
            await session.flush()

            return user_model_to_entity(user_model)
