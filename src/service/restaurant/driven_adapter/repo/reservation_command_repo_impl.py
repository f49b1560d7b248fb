from typing import AsyncContextManager, Callable
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel
from src.service.restaurant.driven_adapter.repo.reservation_query_repo_impl import (
    reservation_model_to_entity,
)


class ReservationCommandRepoImpl(IReservationCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, reservation: Reservation) -> Reservation:
        async with self.session_factory() as session:
            model = ReservationModel(
                id=reservation.id,
                table_id=reservation.table_id,
                user_id=reservation.user_id,
                guest_name=reservation.guest_name,
                guest_email=reservation.guest_email,
                guest_phone=reservation.guest_phone,
                number_of_guests=reservation.number_of_guests,
                reservation_time=reservation.reservation_time,
                deleted=reservation.deleted,
            )
            session.add(model)
            await session.flush()
            await session.refresh(model)

            return reservation_model_to_entity(model)

    @Logger.io
    async def update(self, reservation: Reservation) -> Reservation:
        async with self.session_factory() as session:
            model = await session.get(ReservationModel, reservation.id)
            if not model:
                raise NotFoundError('Reservation not found')

            model.table_id = reservation.table_id
            model.user_id = reservation.user_id
            model.guest_name = reservation.guest_name
            model.guest_email = reservation.guest_email
            model.guest_phone = reservation.guest_phone
            model.number_of_guests = reservation.number_of_guests
            model.reservation_time = reservation.reservation_time
            model.deleted = reservation.deleted
            await session.flush()

            return reservation_model_to_entity(model)

    @Logger.io
    async def detach_user(self, *, user_id: UUID) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                update(ReservationModel)
                .where(ReservationModel.user_id == user_id)
                .values(user_id=None, deleted=True)
            )
            return result.rowcount or 0
