from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.service.restaurant.domain.entity.user_entity import UserEntity, UserRole
from src.service.restaurant.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class RoleAuthStrategy:
    @staticmethod
    def is_admin(user: UserEntity) -> bool:
        return user.role == UserRole.ADMIN

    @staticmethod
    def is_staff_or_admin(user: UserEntity) -> bool:
        return user.role in (UserRole.ADMIN, UserRole.STAFF)

    @staticmethod
    def can_manage_user(user: UserEntity, target_user_id) -> bool:
        return user.role == UserRole.ADMIN or user.id == target_user_id


@inject
async def get_current_user(
    authorization: Optional[str] = Header(None),
    cookie_token: Optional[str] = Cookie(None, alias=settings.ACCESS_TOKEN_COOKIE),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    """Current user from the JWT (stateless, no DB query)"""
    token = jwt_auth.extract_token(authorization, cookie_token)
    return jwt_auth.get_current_user_info_from_jwt(token)


async def require_admin(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={
            'user.id': str(current_user.id),
            'user.role': current_user.role.value,
        },
    ):
        if not RoleAuthStrategy.is_admin(current_user):
            raise ForbiddenError('Only admins can perform this action')
        return current_user


async def require_staff_or_admin(
    current_user: UserEntity = Depends(get_current_user),
) -> UserEntity:
    if not RoleAuthStrategy.is_staff_or_admin(current_user):
        raise ForbiddenError("You don't have permission to perform this action")
    return current_user


@inject
async def get_optional_current_user(
    authorization: Optional[str] = Header(None),
    cookie_token: Optional[str] = Cookie(None, alias=settings.ACCESS_TOKEN_COOKIE),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> Optional[UserEntity]:
    """For public routes that behave differently for signed-in callers."""
    token = jwt_auth.extract_token(authorization, cookie_token)
    if not token:
        return None
    return jwt_auth.get_current_user_info_from_jwt(token)
