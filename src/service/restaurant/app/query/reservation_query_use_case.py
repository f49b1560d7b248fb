import re
from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import BadRequestError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.restaurant.domain.entity.reservation_entity import Reservation


GUEST_EMAIL_PATTERN = re.compile(r'[A-Za-z0-9+_.-]+@(.+)')
GUEST_PHONE_PATTERN = re.compile(r'\+?[0-9]{7,15}')


class ReservationQueryUseCase:
    def __init__(self, *, reservation_query_repo: IReservationQueryRepo) -> None:
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo)

    @Logger.io
    async def get(self, *, reservation_id: UUID) -> Reservation:
        reservation = await self.reservation_query_repo.get_by_id(reservation_id)
        if not reservation:
            raise NotFoundError('Reservation not found')
        return reservation

    @Logger.io
    async def list_active(self) -> List[Reservation]:
        return await self.reservation_query_repo.list_active()

    @Logger.io
    async def list_including_deleted(self) -> List[Reservation]:
        return await self.reservation_query_repo.list_all()

    @Logger.io
    async def list_by_user(self, *, user_id: UUID) -> List[Reservation]:
        return await self.reservation_query_repo.list_by_user(user_id)

    @Logger.io
    async def list_by_table(self, *, table_id: UUID) -> List[Reservation]:
        return await self.reservation_query_repo.list_by_table(table_id)

    @Logger.io
    async def list_by_guest_name(self, *, guest_name: str) -> List[Reservation]:
        if not guest_name or not guest_name.strip():
            raise BadRequestError('Guest name cannot be empty.')
        return await self.reservation_query_repo.list_by_guest_name(guest_name)

    @Logger.io
    async def list_by_guest_email(self, *, guest_email: str) -> List[Reservation]:
        if not guest_email or not GUEST_EMAIL_PATTERN.fullmatch(guest_email):
            raise BadRequestError('Valid guest email is required.')
        return await self.reservation_query_repo.list_by_guest_email(guest_email)

    @Logger.io
    async def list_by_guest_phone(self, *, guest_phone: str) -> List[Reservation]:
        if not guest_phone or not GUEST_PHONE_PATTERN.fullmatch(guest_phone):
            raise BadRequestError('Valid guest phone number is required.')
        return await self.reservation_query_repo.list_by_guest_phone(guest_phone)
