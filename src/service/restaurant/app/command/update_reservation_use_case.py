from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.reservation_admission import ReservationAdmission
from src.service.restaurant.app.dto.reservation_dto import ReservationDto
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.value_object.business_hours import BusinessHours


class UpdateReservationUseCase:
    def __init__(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        reservation_query_repo: IReservationQueryRepo,
        admission: ReservationAdmission,
        business_hours: BusinessHours,
    ) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.reservation_query_repo = reservation_query_repo
        self.admission = admission
        self.business_hours = business_hours

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
        admission: ReservationAdmission = Depends(Provide[Container.reservation_admission]),
        business_hours: BusinessHours = Depends(Provide[Container.business_hours]),
    ) -> Self:
        return cls(
            reservation_command_repo=reservation_command_repo,
            reservation_query_repo=reservation_query_repo,
            admission=admission,
            business_hours=business_hours,
        )

    @Logger.io
    async def update(self, *, reservation_id: UUID, dto: ReservationDto) -> Reservation:
        reservation = await self.reservation_query_repo.get_by_id(reservation_id)
        if not reservation:
            raise NotFoundError('Reservation not found')

        await self.admission.ensure_references(table_id=dto.table_id, user_id=dto.user_id)

        reservation.apply_changes(
            table_id=dto.table_id,
            reservation_time=self.business_hours.to_local(dto.reservation_time),
            number_of_guests=dto.number_of_guests,
            user_id=dto.user_id,
            guest_name=dto.guest_name,
            guest_email=dto.guest_email,
            guest_phone=dto.guest_phone,
        )
        # The reservation must not collide with itself
        await self.admission.admit(reservation, operation='update', exclude_id=reservation_id)

        updated = await self.reservation_command_repo.update(reservation)
        Logger.base.info(f'✏️ [RESERVATION] Updated reservation {reservation_id}')
        return updated
