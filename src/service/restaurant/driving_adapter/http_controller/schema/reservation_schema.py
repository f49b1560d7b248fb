from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, FutureDatetime

from src.service.restaurant.app.dto.reservation_dto import ReservationDto


PHONE_PATTERN = r'^\+?[0-9]{7,15}$'


class ReservationRequest(BaseModel):
    """Create / full-replace update body. Either user_id or guest name + email is required."""

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'table_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                    'reservation_time': '2030-05-01T19:00:00',
                    'number_of_guests': 4,
                    'guest_name': 'Jane Doe',
                    'guest_email': 'jane@example.com',
                    'guest_phone': '+886912345678',
                },
                {
                    'table_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                    'reservation_time': '2030-05-01T12:30:00',
                    'number_of_guests': 2,
                    'user_id': '01936d90-0000-7000-8000-000000000001',
                },
            ]
        }
    }

    table_id: UUID
    reservation_time: FutureDatetime  # restaurant-local when no offset is given
    number_of_guests: int = Field(1, ge=1)
    user_id: Optional[UUID] = None
    guest_name: Optional[str] = Field(None, min_length=2, max_length=255)
    guest_email: Optional[EmailStr] = None
    guest_phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)

    def to_dto(self) -> ReservationDto:
        return ReservationDto(
            table_id=self.table_id,
            reservation_time=self.reservation_time,
            number_of_guests=self.number_of_guests,
            user_id=self.user_id,
            guest_name=self.guest_name,
            guest_email=self.guest_email,
            guest_phone=self.guest_phone,
        )


class ReservationResponse(BaseModel):
    model_config = {'from_attributes': True}

    id: UUID
    table_id: UUID
    reservation_time: datetime
    number_of_guests: int
    user_id: Optional[UUID] = None
    guest_name: Optional[str] = None
    guest_email: Optional[str] = None
    guest_phone: Optional[str] = None
    deleted: bool = False
    created_at: Optional[datetime] = None
