"""User command DTOs"""

from typing import Optional

import attrs

from src.service.restaurant.domain.entity.user_entity import UserRole


@attrs.define(frozen=True)
class CreateUserDto:
    email: str
    password: str = attrs.field(repr=False)
    name: str
    role: UserRole = UserRole.CUSTOMER


@attrs.define(frozen=True)
class UpdateUserDto:
    email: str
    name: str
    password: Optional[str] = attrs.field(default=None, repr=False)
