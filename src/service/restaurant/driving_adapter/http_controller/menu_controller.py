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
    MenuRequest,
    MenuResponse,
)


router = APIRouter()


@router.post('', response_model=MenuResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_menu(
    request: MenuRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuCommandUseCase = Depends(MenuCommandUseCase.depends),
) -> MenuResponse:
    return MenuResponse.model_validate(await use_case.create_menu(name=request.name))


@router.get('', response_model=List[MenuResponse])
@Logger.io
async def list_menus(
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuQueryUseCase = Depends(MenuQueryUseCase.depends),
) -> List[MenuResponse]:
    return [MenuResponse.model_validate(m) for m in await use_case.list_menus()]


@router.get('/{menu_id}', response_model=MenuResponse)
@Logger.io
async def get_menu(
    menu_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuQueryUseCase = Depends(MenuQueryUseCase.depends),
) -> MenuResponse:
    return MenuResponse.model_validate(await use_case.get_menu(menu_id=menu_id))


@router.put('/{menu_id}', response_model=MenuResponse)
@Logger.io
async def update_menu(
    menu_id: UUID,
    request: MenuRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuCommandUseCase = Depends(MenuCommandUseCase.depends),
) -> MenuResponse:
    menu = await use_case.rename_menu(menu_id=menu_id, name=request.name)
    return MenuResponse.model_validate(menu)


@router.delete('/{menu_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_menu(
    menu_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MenuCommandUseCase = Depends(MenuCommandUseCase.depends),
) -> None:
    await use_case.delete_menu(menu_id=menu_id)
