from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types import generate_uuid7


@attrs.define
class DiningTable:
    number: int
    capacity: int
    id: Optional[UUID] = None

    @classmethod
    def create(cls, *, number: int, capacity: int) -> 'DiningTable':
        if number < 1:
            raise DomainError('Table number must be positive.')
        if capacity < 1:
            raise DomainError('Table capacity must be at least 1.')
        return cls(id=generate_uuid7(), number=number, capacity=capacity)
