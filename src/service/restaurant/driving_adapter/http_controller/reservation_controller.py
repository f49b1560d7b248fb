from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.restaurant.app.command.delete_reservation_use_case import (
    DeleteReservationUseCase,
)
from src.service.restaurant.app.command.update_reservation_use_case import (
    UpdateReservationUseCase,
)
from src.service.restaurant.app.query.reservation_query_use_case import ReservationQueryUseCase
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.entity.user_entity import UserEntity
from src.service.restaurant.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.restaurant.driving_adapter.http_controller.schema.reservation_schema import (
    ReservationRequest,
    ReservationResponse,
)


router = APIRouter()


def _to_responses(reservations: List[Reservation]) -> List[ReservationResponse]:
    return [ReservationResponse.model_validate(r) for r in reservations]


@router.post('', response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: ReservationRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.create(request.to_dto())
    return ReservationResponse.model_validate(reservation)


@router.get('', response_model=List[ReservationResponse])
@Logger.io
async def list_reservations(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ReservationQueryUseCase = Depends(ReservationQueryUseCase.depends),
) -> List[ReservationResponse]:
    return _to_responses(await use_case.list_active())


@router.get('/all', response_model=List[ReservationResponse])
@Logger.io
async def list_all_reservations(
    current_user: UserEntity = Depends(require_admin),
    use_case: ReservationQueryUseCase = Depends(ReservationQueryUseCase.depends),
) -> List[ReservationResponse]:
    """Includes soft-deleted reservations."""
    return _to_responses(await use_case.list_including_deleted())


@router.get('/user/{user_id}', response_model=List[ReservationResponse])
@Logger.io
async def list_reservations_by_user(
    user_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ReservationQueryUseCase = Depends(ReservationQueryUseCase.depends),
) -> List[ReservationResponse]:
    return _to_responses(await use_case.list_by_user(user_id=user_id))


@router.get('/table/{table_id}', response_model=List[ReservationResponse])
@Logger.io
async def list_reservations_by_table(
    table_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ReservationQueryUseCase = Depends(ReservationQueryUseCase.depends),
) -> List[ReservationResponse]:
    return _to_responses(await use_case.list_by_table(table_id=table_id))


@router.get('/guest/name/{guest_name}', response_model=List[ReservationResponse])
@Logger.io
async def list_reservations_by_guest_name(
    guest_name: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ReservationQueryUseCase = Depends(ReservationQueryUseCase.depends),
) -> List[ReservationResponse]:
    return _to_responses(await use_case.list_by_guest_name(guest_name=guest_name))


@router.get('/guest/email/{guest_email}', response_model=List[ReservationResponse])
@Logger.io
async def list_reservations_by_guest_email(
    guest_email: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ReservationQueryUseCase = Depends(ReservationQueryUseCase.depends),
) -> List[ReservationResponse]:
    return _to_responses(await use_case.list_by_guest_email(guest_email=guest_email))


@router.get('/guest/phone/{guest_phone}', response_model=List[ReservationResponse])
@Logger.io
async def list_reservations_by_guest_phone(
    guest_phone: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ReservationQueryUseCase = Depends(ReservationQueryUseCase.depends),
) -> List[ReservationResponse]:
    return _to_responses(await use_case.list_by_guest_phone(guest_phone=guest_phone))


@router.get('/{reservation_id}', response_model=ReservationResponse)
@Logger.io
async def get_reservation(
    reservation_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ReservationQueryUseCase = Depends(ReservationQueryUseCase.depends),
) -> ReservationResponse:
    return ReservationResponse.model_validate(await use_case.get(reservation_id=reservation_id))


@router.put('/{reservation_id}', response_model=ReservationResponse)
@Logger.io
async def update_reservation(
    reservation_id: UUID,
    request: ReservationRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateReservationUseCase = Depends(UpdateReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.update(reservation_id=reservation_id, dto=request.to_dto())
    return ReservationResponse.model_validate(reservation)


@router.delete('/{reservation_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_reservation(
    reservation_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: DeleteReservationUseCase = Depends(DeleteReservationUseCase.depends),
) -> None:
    await use_case.delete(reservation_id=reservation_id)
