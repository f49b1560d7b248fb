from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.bill_command_use_case import BillCommandUseCase
from src.service.restaurant.app.query.bill_query_use_case import BillQueryUseCase
from src.service.restaurant.domain.entity.user_entity import UserEntity
from src.service.restaurant.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
)
from src.service.restaurant.driving_adapter.http_controller.schema.bill_schema import (
    BillRequest,
    BillResponse,
)


router = APIRouter()


@router.post('', response_model=BillResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_bill(
    request: BillRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: BillCommandUseCase = Depends(BillCommandUseCase.depends),
) -> BillResponse:
    bill = await use_case.create_bill(
        order_id=request.order_id,
        total_amount=request.total_amount,
        tax=request.tax,
        discount=request.discount,
    )
    return BillResponse.model_validate(bill)


@router.get('/order/{order_id}', response_model=BillResponse)
@Logger.io
async def get_bill_by_order(
    order_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: BillQueryUseCase = Depends(BillQueryUseCase.depends),
) -> BillResponse:
    return BillResponse.model_validate(await use_case.get_bill_by_order(order_id=order_id))


@router.get('/{bill_id}', response_model=BillResponse)
@Logger.io
async def get_bill(
    bill_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: BillQueryUseCase = Depends(BillQueryUseCase.depends),
) -> BillResponse:
    return BillResponse.model_validate(await use_case.get_bill(bill_id=bill_id))


@router.put('/{bill_id}', response_model=BillResponse)
@Logger.io
async def update_bill(
    bill_id: UUID,
    request: BillRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: BillCommandUseCase = Depends(BillCommandUseCase.depends),
) -> BillResponse:
    bill = await use_case.update_bill(
        bill_id=bill_id,
        order_id=request.order_id,
        total_amount=request.total_amount,
        tax=request.tax,
        discount=request.discount,
    )
    return BillResponse.model_validate(bill)


@router.delete('/{bill_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_bill(
    bill_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: BillCommandUseCase = Depends(BillCommandUseCase.depends),
) -> None:
    await use_case.delete_bill(bill_id=bill_id)
