from datetime import datetime
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types import generate_uuid7


@attrs.define
class Reservation:
    table_id: UUID
    reservation_time: datetime
    number_of_guests: int = 1
    user_id: Optional[UUID] = None
    guest_name: Optional[str] = None
    guest_email: Optional[str] = None
    guest_phone: Optional[str] = None
    id: Optional[UUID] = None
    deleted: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        table_id: UUID,
        reservation_time: datetime,
        number_of_guests: int,
        user_id: Optional[UUID] = None,
        guest_name: Optional[str] = None,
        guest_email: Optional[str] = None,
        guest_phone: Optional[str] = None,
    ) -> 'Reservation':
        reservation = cls(
            id=generate_uuid7(),
            table_id=table_id,
            reservation_time=reservation_time,
            number_of_guests=number_of_guests,
            user_id=user_id,
            guest_name=guest_name,
            guest_email=guest_email,
            guest_phone=guest_phone,
        )
        reservation.validate_contact()
        return reservation

    @property
    def is_guest(self) -> bool:
        return self.user_id is None

    def validate_contact(self) -> None:
        if self.number_of_guests < 1:
            raise DomainError('There must be at least one guest.')
        if self.user_id is None and not (self.guest_name and self.guest_email):
            raise DomainError('Either a user or the guest name and email must be provided.')

    def apply_changes(
        self,
        *,
        table_id: UUID,
        reservation_time: datetime,
        number_of_guests: int,
        user_id: Optional[UUID],
        guest_name: Optional[str],
        guest_email: Optional[str],
        guest_phone: Optional[str],
    ) -> None:
        """Full replace of the editable fields."""
        self.table_id = table_id
        self.reservation_time = reservation_time
        self.number_of_guests = number_of_guests
        self.user_id = user_id
        self.guest_name = guest_name
        self.guest_email = guest_email
        self.guest_phone = guest_phone
        self.validate_contact()

    def soft_delete(self) -> None:
        self.deleted = True

    def detach_user(self) -> None:
        """Used when the owning user is deleted; the reservation is kept for audit."""
        self.user_id = None
        self.deleted = True
