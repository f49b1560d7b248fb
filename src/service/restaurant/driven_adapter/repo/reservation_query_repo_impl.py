from datetime import datetime
from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel


def reservation_model_to_entity(model: ReservationModel) -> Reservation:
    return Reservation(
        id=model.id,
        table_id=model.table_id,
        user_id=model.user_id,
        guest_name=model.guest_name,
        guest_email=model.guest_email,
        guest_phone=model.guest_phone,
        number_of_guests=model.number_of_guests,
        reservation_time=model.reservation_time,
        deleted=model.deleted,
        created_at=model.created_at,
    )


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _active() -> Select:
        return select(ReservationModel).where(ReservationModel.deleted.is_(False))

    async def _fetch_all(self, stmt: Select) -> List[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                stmt.order_by(ReservationModel.reservation_time, ReservationModel.id)
            )
            return [reservation_model_to_entity(m) for m in result.scalars().all()]

    async def _exists(self, stmt: Select, exclude_id: Optional[UUID]) -> bool:
        if exclude_id is not None:
            stmt = stmt.where(ReservationModel.id != exclude_id)
        async with self.session_factory() as session:
            result = await session.execute(stmt.limit(1))
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def get_by_id(self, reservation_id: UUID) -> Optional[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._active().where(ReservationModel.id == reservation_id)
            )
            model = result.scalar_one_or_none()
            return reservation_model_to_entity(model) if model else None

    @Logger.io
    async def list_active(self) -> List[Reservation]:
        return await self._fetch_all(self._active())

    @Logger.io
    async def list_all(self) -> List[Reservation]:
        return await self._fetch_all(select(ReservationModel))

    @Logger.io
    async def list_by_user(self, user_id: UUID) -> List[Reservation]:
        return await self._fetch_all(self._active().where(ReservationModel.user_id == user_id))

    @Logger.io
    async def list_by_table(self, table_id: UUID) -> List[Reservation]:
        return await self._fetch_all(self._active().where(ReservationModel.table_id == table_id))

    @Logger.io
    async def list_by_guest_name(self, guest_name: str) -> List[Reservation]:
        return await self._fetch_all(
            self._active().where(ReservationModel.guest_name == guest_name)
        )

    @Logger.io
    async def list_by_guest_email(self, guest_email: str) -> List[Reservation]:
        return await self._fetch_all(
            self._active().where(ReservationModel.guest_email == guest_email)
        )

    @Logger.io
    async def list_by_guest_phone(self, guest_phone: str) -> List[Reservation]:
        return await self._fetch_all(
            self._active().where(ReservationModel.guest_phone == guest_phone)
        )

    @Logger.io
    async def exists_for_table_between(
        self,
        *,
        table_id: UUID,
        start: datetime,
        end: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        stmt = select(ReservationModel.id).where(
            ReservationModel.deleted.is_(False),
            ReservationModel.table_id == table_id,
            ReservationModel.reservation_time.between(start, end),
        )
        return await self._exists(stmt, exclude_id)

    @Logger.io
    async def exists_for_user_at(
        self,
        *,
        user_id: UUID,
        reservation_time: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        stmt = select(ReservationModel.id).where(
            ReservationModel.deleted.is_(False),
            ReservationModel.user_id == user_id,
            ReservationModel.reservation_time == reservation_time,
        )
        return await self._exists(stmt, exclude_id)

    @Logger.io
    async def exists_for_guest_email_at(
        self,
        *,
        guest_email: str,
        reservation_time: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        stmt = select(ReservationModel.id).where(
            ReservationModel.deleted.is_(False),
            ReservationModel.guest_email == guest_email,
            ReservationModel.reservation_time == reservation_time,
        )
        return await self._exists(stmt, exclude_id)
