from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional
from uuid import UUID

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import (
    AuthenticationError,
    BadRequestError,
    DomainError,
    ForbiddenError,
)
from src.platform.types import generate_uuid7


if TYPE_CHECKING:
    from src.service.restaurant.app.interface.i_password_hasher import IPasswordHasher


class UserRole(str, Enum):
    ADMIN = 'admin'
    STAFF = 'staff'
    CUSTOMER = 'customer'


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[UUID] = None
    role: UserRole = UserRole.CUSTOMER
    is_active: bool = True
    deleted: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        email: str,
        name: str,
        role: UserRole = UserRole.CUSTOMER,
    ) -> 'UserEntity':
        cls.validate_role(role)
        return cls(id=generate_uuid7(), email=email, name=name, role=role, is_active=True)

    def validate_active(self) -> None:
        if self.deleted:
            raise AuthenticationError('LOGIN_BAD_CREDENTIALS')
        if not self.is_active:
            raise ForbiddenError('User is inactive')

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise AuthenticationError('LOGIN_BAD_CREDENTIALS')

        return user_entity

    @staticmethod
    def validate_role(role: UserRole | str) -> None:
        valid_roles = [r.value for r in UserRole]
        if role not in valid_roles:
            raise DomainError(f'Invalid role: {role}. Must be one of: {", ".join(valid_roles)}')

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def disable(self) -> None:
        if not self.is_active:
            raise BadRequestError('User is already disabled.')
        self.is_active = False

    def soft_delete(self) -> None:
        self.deleted = True
