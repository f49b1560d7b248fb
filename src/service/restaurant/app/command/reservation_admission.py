"""
Reservation admission pipeline, shared by create and update

Steps run in order and the first failure aborts before anything is written:
1. referenced table (and user, when given) must exist -> 404
2. business rules (ReservationValidator) -> 400
3. table double booking -> 409
4. user double booking, or guest-email double booking for guest reservations -> 409
"""

import time
from typing import Optional
from uuid import UUID

from src.platform.exception.exceptions import BadRequestError, ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.restaurant_metrics import metrics
from src.service.restaurant.app.interface.i_dining_table_repo import IDiningTableRepo
from src.service.restaurant.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.reservation_conflict_checker import (
    GUEST_CONFLICT_MESSAGE,
    TABLE_CONFLICT_MESSAGE,
    USER_CONFLICT_MESSAGE,
    ReservationConflictChecker,
)
from src.service.restaurant.domain.reservation_validator import ReservationValidator


class ReservationAdmission:
    def __init__(
        self,
        *,
        validator: ReservationValidator,
        conflict_checker: ReservationConflictChecker,
        dining_table_repo: IDiningTableRepo,
        user_query_repo: IUserQueryRepo,
    ) -> None:
        self.validator = validator
        self.conflict_checker = conflict_checker
        self.dining_table_repo = dining_table_repo
        self.user_query_repo = user_query_repo

    @Logger.io
    async def ensure_references(self, *, table_id: UUID, user_id: Optional[UUID]) -> None:
        if not await self.dining_table_repo.get_by_id(table_id):
            raise NotFoundError(f'Table not found with ID: {table_id}')
        if user_id is not None and not await self.user_query_repo.get_by_id(user_id):
            raise NotFoundError(f'User not found with ID: {user_id}')

    @Logger.io
    async def admit(
        self,
        reservation: Reservation,
        *,
        operation: str,
        exclude_id: Optional[UUID] = None,
    ) -> None:
        started = time.perf_counter()
        result = 'error'
        try:
            error = self.validator.validate(reservation)
            if error:
                result = 'invalid'
                raise BadRequestError(error)

            if await self.conflict_checker.has_table_conflict(
                table_id=reservation.table_id,
                reservation_time=reservation.reservation_time,
                exclude_id=exclude_id,
            ):
                result = 'table_conflict'
                raise ConflictError(TABLE_CONFLICT_MESSAGE)

            if reservation.user_id is not None:
                if await self.conflict_checker.has_user_conflict(
                    user_id=reservation.user_id,
                    reservation_time=reservation.reservation_time,
                    exclude_id=exclude_id,
                ):
                    result = 'user_conflict'
                    raise ConflictError(USER_CONFLICT_MESSAGE)
            elif reservation.guest_email and await self.conflict_checker.has_guest_conflict(
                guest_email=reservation.guest_email,
                reservation_time=reservation.reservation_time,
                exclude_id=exclude_id,
            ):
                result = 'guest_conflict'
                raise ConflictError(GUEST_CONFLICT_MESSAGE)
            result = 'accepted'
        finally:
            metrics.record_reservation(
                operation=operation, result=result, duration=time.perf_counter() - started
            )

        Logger.base.info(
            f'✅ [RESERVATION] {operation} admitted: table={reservation.table_id} '
            f'time={reservation.reservation_time.isoformat()}'
        )
