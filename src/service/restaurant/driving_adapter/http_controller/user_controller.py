from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.user_command_use_case import UserCommandUseCase
from src.service.restaurant.app.query.user_query_use_case import UserQueryUseCase
from src.service.restaurant.domain.entity.user_entity import UserEntity, UserRole
from src.service.restaurant.driving_adapter.http_controller.auth.role_auth import (
    RoleAuthStrategy,
    get_current_user,
    get_optional_current_user,
    require_admin,
)
from src.service.restaurant.driving_adapter.http_controller.schema.user_schema import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)


router = APIRouter()


@router.post('', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: CreateUserRequest,
    current_user: Optional[UserEntity] = Depends(get_optional_current_user),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> UserResponse:
    if request.role != UserRole.CUSTOMER and not (
        current_user and RoleAuthStrategy.is_admin(current_user)
    ):
        raise ForbiddenError('Only admins can create staff or admin accounts')

    user_entity = await use_case.create_user(request.to_dto())
    return UserResponse.model_validate(user_entity)


@router.get('', response_model=List[UserResponse])
@Logger.io
async def list_users(
    current_user: UserEntity = Depends(require_admin),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> List[UserResponse]:
    users = await use_case.list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.get('/me', response_model=UserResponse)
@Logger.io
async def get_me(
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> UserResponse:
    assert current_user.id is not None
    user_entity = await use_case.get_user_by_id(user_id=current_user.id)
    return UserResponse.model_validate(user_entity)


@router.get('/email/{email}', response_model=UserResponse)
@Logger.io
async def get_user_by_email(
    email: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.get_user_by_email(email=email)
    return UserResponse.model_validate(user_entity)


@router.get('/{user_id}', response_model=UserResponse)
@Logger.io
async def get_user(
    user_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.get_user_by_id(user_id=user_id)
    return UserResponse.model_validate(user_entity)


@router.put('/{user_id}', response_model=UserResponse)
@Logger.io
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> UserResponse:
    if not RoleAuthStrategy.can_manage_user(current_user, user_id):
        raise ForbiddenError('You can only update your own account')

    user_entity = await use_case.update_user(user_id=user_id, dto=request.to_dto())
    return UserResponse.model_validate(user_entity)


@router.patch('/{user_id}/disable', response_model=UserResponse)
@Logger.io
async def disable_user(
    user_id: UUID,
    current_user: UserEntity = Depends(require_admin),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.disable_user(user_id=user_id)
    return UserResponse.model_validate(user_entity)


@router.delete('/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_user(
    user_id: UUID,
    current_user: UserEntity = Depends(require_admin),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> None:
    await use_case.delete_user(user_id=user_id)
