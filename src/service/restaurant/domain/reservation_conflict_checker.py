from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from src.service.restaurant.domain.value_object.business_hours import BusinessHours


if TYPE_CHECKING:
    from src.service.restaurant.app.interface.i_reservation_query_repo import (
        IReservationQueryRepo,
    )


TABLE_CONFLICT_MESSAGE = 'Table is already reserved at that time.'
USER_CONFLICT_MESSAGE = 'User already has a reservation at this time.'
GUEST_CONFLICT_MESSAGE = 'Guest with this email already has a reservation at this time.'


class ReservationConflictChecker:
    """
    Double-booking detection against active (not deleted) reservations.

    - table: another reservation on the table starts within
      start ± (duration + buffer), bounds inclusive
    - user / guest email: another reservation at exactly the same start

    `exclude_id` skips the reservation being updated.
    """

    def __init__(
        self,
        *,
        reservation_query_repo: 'IReservationQueryRepo',
        business_hours: BusinessHours,
    ) -> None:
        self.reservation_query_repo = reservation_query_repo
        self.business_hours = business_hours

    async def has_table_conflict(
        self,
        *,
        table_id: UUID,
        reservation_time: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        lower, upper = self.business_hours.conflict_window(reservation_time)
        return await self.reservation_query_repo.exists_for_table_between(
            table_id=table_id, start=lower, end=upper, exclude_id=exclude_id
        )

    async def has_user_conflict(
        self,
        *,
        user_id: UUID,
        reservation_time: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        return await self.reservation_query_repo.exists_for_user_at(
            user_id=user_id, reservation_time=reservation_time, exclude_id=exclude_id
        )

    async def has_guest_conflict(
        self,
        *,
        guest_email: str,
        reservation_time: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        return await self.reservation_query_repo.exists_for_guest_email_at(
            guest_email=guest_email, reservation_time=reservation_time, exclude_id=exclude_id
        )
