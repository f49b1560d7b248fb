"""
Reservation DTOs

Input of the create / update reservation use cases, built by the HTTP layer
from the validated request body.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

import attrs


@attrs.define(frozen=True)
class ReservationDto:
    table_id: UUID
    reservation_time: datetime  # restaurant-local, naive
    number_of_guests: int = 1
    user_id: Optional[UUID] = None
    guest_name: Optional[str] = None
    guest_email: Optional[str] = None
    guest_phone: Optional[str] = None
