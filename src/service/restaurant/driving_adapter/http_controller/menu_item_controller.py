from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.menu_command_use_case import MenuCommandUseCase
from src.service.restaurant.app.query.menu_query_use_case import MenuQueryUseCase
from src.service.restaurant.domain.entity.user_entity import UserEntity
from src.service.restaurant.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
)
from src.service.restaurant.driving_adapter.http_controller.schema.menu_schema import (
    MenuItemRequest,
    MenuItemResponse,
)


router = APIRouter()


@router.post('', response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_menu_item(
    request: MenuItemRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuCommandUseCase = Depends(MenuCommandUseCase.depends),
) -> MenuItemResponse:
    item = await use_case.create_item(
        menu_id=request.menu_id,
        name=request.name,
        price=request.price,
        description=request.description,
        category=request.category,
    )
    return MenuItemResponse.model_validate(item)


@router.get('', response_model=List[MenuItemResponse])
@Logger.io
async def list_menu_items(
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuQueryUseCase = Depends(MenuQueryUseCase.depends),
) -> List[MenuItemResponse]:
    return [MenuItemResponse.model_validate(i) for i in await use_case.list_items()]


@router.get('/menu/{menu_id}', response_model=List[MenuItemResponse])
@Logger.io
async def list_menu_items_by_menu(
    menu_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuQueryUseCase = Depends(MenuQueryUseCase.depends),
) -> List[MenuItemResponse]:
    items = await use_case.list_items_by_menu(menu_id=menu_id)
    return [MenuItemResponse.model_validate(i) for i in items]


@router.get('/{item_id}', response_model=MenuItemResponse)
@Logger.io
async def get_menu_item(
    item_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuQueryUseCase = Depends(MenuQueryUseCase.depends),
) -> MenuItemResponse:
    return MenuItemResponse.model_validate(await use_case.get_item(item_id=item_id))


@router.put('/{item_id}', response_model=MenuItemResponse)
@Logger.io
async def update_menu_item(
    item_id: UUID,
    request: MenuItemRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuCommandUseCase = Depends(MenuCommandUseCase.depends),
) -> MenuItemResponse:
    item = await use_case.update_item(
        item_id=item_id,
        menu_id=request.menu_id,
        name=request.name,
        price=request.price,
        description=request.description,
        category=request.category,
    )
    return MenuItemResponse.model_validate(item)


@router.delete('/{item_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_menu_item(
    item_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuCommandUseCase = Depends(MenuCommandUseCase.depends),
) -> None:
    await use_case.delete_item(item_id=item_id)
