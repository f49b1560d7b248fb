from abc import ABC, abstractmethod
from uuid import UUID

from src.service.restaurant.domain.entity.reservation_entity import Reservation


class IReservationCommandRepo(ABC):
    @abstractmethod
    async def create(self, reservation: Reservation) -> Reservation:
        pass

    @abstractmethod
    async def update(self, reservation: Reservation) -> Reservation:
        pass

    @abstractmethod
    async def detach_user(self, *, user_id: UUID) -> int:
        """Clear the user reference and soft delete every reservation of the user.

        Returns the number of reservations touched.
        """
        pass
