from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.dining_table_command_use_case import (
    DiningTableCommandUseCase,
)
from src.service.restaurant.app.query.dining_table_query_use_case import DiningTableQueryUseCase
from src.service.restaurant.domain.entity.user_entity import UserEntity
from src.service.restaurant.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_staff_or_admin,
)
from src.service.restaurant.driving_adapter.http_controller.schema.dining_table_schema import (
    DiningTableRequest,
    DiningTableResponse,
)


router = APIRouter()


@router.post('', response_model=DiningTableResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_table(
    request: DiningTableRequest,
    current_user: UserEntity = Depends(require_staff_or_admin),
    use_case: DiningTableCommandUseCase = Depends(DiningTableCommandUseCase.depends),
) -> DiningTableResponse:
    table = await use_case.create_table(number=request.number, capacity=request.capacity)
    return DiningTableResponse.model_validate(table)


@router.get('', response_model=List[DiningTableResponse])
@Logger.io
async def list_tables(
    current_user: UserEntity = Depends(get_current_user),
    use_case: DiningTableQueryUseCase = Depends(DiningTableQueryUseCase.depends),
) -> List[DiningTableResponse]:
    return [DiningTableResponse.model_validate(t) for t in await use_case.list_tables()]


@router.get('/{table_id}', response_model=DiningTableResponse)
@Logger.io
async def get_table(
    table_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: DiningTableQueryUseCase = Depends(DiningTableQueryUseCase.depends),
) -> DiningTableResponse:
    return DiningTableResponse.model_validate(await use_case.get_table(table_id=table_id))
