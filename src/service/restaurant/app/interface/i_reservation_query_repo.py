from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.service.restaurant.domain.entity.reservation_entity import Reservation


class IReservationQueryRepo(ABC):
    """Reservation read side. Listings skip soft-deleted rows unless stated otherwise."""

    @abstractmethod
    async def get_by_id(self, reservation_id: UUID) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def list_active(self) -> List[Reservation]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Reservation]:
        """Includes soft-deleted reservations."""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> List[Reservation]:
        pass

    @abstractmethod
    async def list_by_table(self, table_id: UUID) -> List[Reservation]:
        pass

    @abstractmethod
    async def list_by_guest_name(self, guest_name: str) -> List[Reservation]:
        pass

    @abstractmethod
    async def list_by_guest_email(self, guest_email: str) -> List[Reservation]:
        pass

    @abstractmethod
    async def list_by_guest_phone(self, guest_phone: str) -> List[Reservation]:
        pass

    @abstractmethod
    async def exists_for_table_between(
        self,
        *,
        table_id: UUID,
        start: datetime,
        end: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        """Active reservation on the table starting inside [start, end], bounds inclusive."""
        pass

    @abstractmethod
    async def exists_for_user_at(
        self,
        *,
        user_id: UUID,
        reservation_time: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        pass

    @abstractmethod
    async def exists_for_guest_email_at(
        self,
        *,
        guest_email: str,
        reservation_time: datetime,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        pass
