from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_password_hasher import IPasswordHasher
from src.service.restaurant.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.restaurant.domain.entity.user_entity import UserEntity, UserRole
from src.service.restaurant.driven_adapter.model.user_model import UserModel


def user_model_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        email=user_model.email,
        name=user_model.name,
        hashed_password=user_model.hashed_password,
        role=UserRole(user_model.role),
        is_active=user_model.is_active,
        deleted=user_model.deleted,
        created_at=user_model.created_at,
    )


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: IPasswordHasher,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email, UserModel.deleted.is_(False))
            )
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return user_model_to_entity(user_model)

    @Logger.io
    async def get_by_id(self, user_id: UUID) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.id == user_id, UserModel.deleted.is_(False))
            )
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return user_model_to_entity(user_model)

    @Logger.io
    async def list_active(self) -> List[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.deleted.is_(False)).order_by(UserModel.id)
            )
            return [user_model_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def exists_by_email(self, email: str, *, exclude_id: Optional[UUID] = None) -> bool:
        async with self.session_factory() as session:
            stmt = select(UserModel.id).where(UserModel.email == email)
            if exclude_id is not None:
                stmt = stmt.where(UserModel.id != exclude_id)
            result = await session.execute(stmt.limit(1))
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def verify_password(self, email: str, plain_password: str) -> Optional[UserEntity]:
        user_entity = await self.get_by_email(email)
        if not user_entity:
            return None

        # Use SecretStr to protect sensitive password data
        if not self.password_hasher.verify_password(
            plain_password=SecretStr(plain_password),
            hashed_password=user_entity.hashed_password,
        ):
            return None

        return user_entity
