from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo


class DeleteReservationUseCase:
    """Soft delete: the row stays for audit and drops out of default listings."""

    def __init__(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        reservation_query_repo: IReservationQueryRepo,
    ) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(
            reservation_command_repo=reservation_command_repo,
            reservation_query_repo=reservation_query_repo,
        )

    @Logger.io
    async def delete(self, *, reservation_id: UUID) -> None:
        reservation = await self.reservation_query_repo.get_by_id(reservation_id)
        if not reservation:
            raise NotFoundError('Reservation not found')

        reservation.soft_delete()
        await self.reservation_command_repo.update(reservation)
        Logger.base.info(f'🗑️ [RESERVATION] Soft deleted reservation {reservation_id}')
