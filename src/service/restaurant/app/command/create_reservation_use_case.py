from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.reservation_admission import ReservationAdmission
from src.service.restaurant.app.dto.reservation_dto import ReservationDto
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.value_object.business_hours import BusinessHours


class CreateReservationUseCase:
    """
    Create a reservation for a registered user or a walk-in guest.

    Reference checks, business rules and double-booking checks run in
    ReservationAdmission before anything is persisted.
    """

    def __init__(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        admission: ReservationAdmission,
        business_hours: BusinessHours,
    ) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.admission = admission
        self.business_hours = business_hours
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        admission: ReservationAdmission = Depends(Provide[Container.reservation_admission]),
        business_hours: BusinessHours = Depends(Provide[Container.business_hours]),
    ) -> Self:
        return cls(
            reservation_command_repo=reservation_command_repo,
            admission=admission,
            business_hours=business_hours,
        )

    @Logger.io
    async def create(self, dto: ReservationDto) -> Reservation:
        with self.tracer.start_as_current_span('use_case.create_reservation') as span:
            span.set_attribute('table_id', str(dto.table_id))
            span.set_attribute('guest', dto.user_id is None)

            await self.admission.ensure_references(table_id=dto.table_id, user_id=dto.user_id)

            reservation = Reservation.create(
                table_id=dto.table_id,
                reservation_time=self.business_hours.to_local(dto.reservation_time),
                number_of_guests=dto.number_of_guests,
                user_id=dto.user_id,
                guest_name=dto.guest_name,
                guest_email=dto.guest_email,
                guest_phone=dto.guest_phone,
            )
            await self.admission.admit(reservation, operation='create')

            saved = await self.reservation_command_repo.create(reservation)
            span.set_attribute('reservation.id', str(saved.id))
            Logger.base.info(f'📝 [RESERVATION] Created reservation {saved.id}')

            return saved
