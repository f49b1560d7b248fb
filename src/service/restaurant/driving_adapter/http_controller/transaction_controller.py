from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.create_transaction_use_case import (
    CreateTransactionUseCase,
)
from src.service.restaurant.app.query.transaction_query_use_case import TransactionQueryUseCase
from src.service.restaurant.domain.entity.user_entity import UserEntity
from src.service.restaurant.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
)
from src.service.restaurant.driving_adapter.http_controller.schema.transaction_schema import (
    TransactionRequest,
    TransactionResponse,
)


router = APIRouter()


@router.post('', response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_transaction(
    request: TransactionRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateTransactionUseCase = Depends(CreateTransactionUseCase.depends),
) -> TransactionResponse:
    transaction = await use_case.create(
        bill_id=request.bill_id, amount=request.amount, payment_method=request.payment_method
    )
    return TransactionResponse.model_validate(transaction)


@router.get('', response_model=List[TransactionResponse])
@Logger.io
async def list_transactions(
    current_user: UserEntity = Depends(get_current_user),
    use_case: TransactionQueryUseCase = Depends(TransactionQueryUseCase.depends),
) -> List[TransactionResponse]:
    return [TransactionResponse.model_validate(t) for t in await use_case.list_transactions()]


@router.get('/bill/{bill_id}', response_model=List[TransactionResponse])
@Logger.io
async def list_transactions_by_bill(
    bill_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: TransactionQueryUseCase = Depends(TransactionQueryUseCase.depends),
) -> List[TransactionResponse]:
    transactions = await use_case.list_by_bill(bill_id=bill_id)
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.get('/{transaction_id}', response_model=TransactionResponse)
@Logger.io
async def get_transaction(
    transaction_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: TransactionQueryUseCase = Depends(TransactionQueryUseCase.depends),
) -> TransactionResponse:
    transaction = await use_case.get_transaction(transaction_id=transaction_id)
    return TransactionResponse.model_validate(transaction)
