"""
User Management Command Use Cases
"""

from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.dto.user_dto import CreateUserDto, UpdateUserDto
from src.service.restaurant.app.interface.i_password_hasher import IPasswordHasher
from src.service.restaurant.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.restaurant.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.restaurant.domain.entity.user_entity import UserEntity, UserRole


class UserCommandUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
        uow: AbstractUnitOfWork,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
            uow=uow,
        )

    async def _get_existing(self, user_id: UUID) -> UserEntity:
        user = await self.user_query_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError(f'User not found with ID: {user_id}')
        return user

    @Logger.io
    async def create_user(self, dto: CreateUserDto) -> UserEntity:
        if await self.user_query_repo.exists_by_email(dto.email):
            raise ConflictError('Email already in use.')

        user_entity = UserEntity.create(email=dto.email, name=dto.name, role=dto.role)
        user_entity.set_password(dto.password, self.password_hasher)

        created = await self.user_command_repo.create(user_entity)
        Logger.base.info(f'👤 [USER] Created user {created.id} ({created.role.value})')
        return created

    @Logger.io
    async def update_user(self, *, user_id: UUID, dto: UpdateUserDto) -> UserEntity:
        user = await self._get_existing(user_id)

        if await self.user_query_repo.exists_by_email(dto.email, exclude_id=user_id):
            raise ConflictError('User with email already exists.')

        user.email = dto.email
        user.name = dto.name
        if dto.password:
            user.set_password(dto.password, self.password_hasher)

        return await self.user_command_repo.update(user)

    @Logger.io
    async def disable_user(self, *, user_id: UUID) -> UserEntity:
        user = await self._get_existing(user_id)
        user.disable()

        disabled = await self.user_command_repo.update(user)
        Logger.base.info(f'🚫 [USER] Disabled user {user_id}')
        return disabled

    @Logger.io
    async def delete_user(self, *, user_id: UUID) -> None:
        """Soft delete the user and detach + soft delete their reservations, atomically."""
        async with self.uow:
            user = await self.uow.user_query_repo.get_by_id(user_id)
            if not user:
                raise NotFoundError(f'User not found with ID: {user_id}')

            user.soft_delete()
            await self.uow.user_command_repo.update(user)
            detached = await self.uow.reservation_command_repo.detach_user(user_id=user_id)
            await self.uow.commit()

        Logger.base.info(f'🗑️ [USER] Deleted user {user_id}, detached {detached} reservations')

    @Logger.io
    async def ensure_admin(self, *, email: str, password: str) -> None:
        """Bootstrap the first admin account; no-op when the email is already taken."""
        if await self.user_query_repo.exists_by_email(email):
            return

        admin = UserEntity.create(email=email, name='Administrator', role=UserRole.ADMIN)
        admin.set_password(password, self.password_hasher)
        await self.user_command_repo.create(admin)
        Logger.base.info(f'👑 [USER] Bootstrapped admin account {email}')
