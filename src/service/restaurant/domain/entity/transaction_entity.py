from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types import generate_uuid7


@attrs.define
class Transaction:
    bill_id: UUID
    amount: Decimal
    payment_method: str = 'cash'
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, bill_id: UUID, amount: Decimal, payment_method: str) -> 'Transaction':
        if amount <= 0:
            raise DomainError('Transaction amount must be positive.')
        return cls(
            id=generate_uuid7(), bill_id=bill_id, amount=amount, payment_method=payment_method
        )
