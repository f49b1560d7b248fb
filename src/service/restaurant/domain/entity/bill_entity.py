from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import BadRequestError, DomainError
from src.platform.types import generate_uuid7


@attrs.define
class Bill:
    order_id: UUID
    total_amount: Decimal
    tax: Decimal = Decimal('0')
    discount: Decimal = Decimal('0')
    final_amount: Decimal = Decimal('0')
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        order_id: UUID,
        total_amount: Decimal,
        tax: Decimal = Decimal('0'),
        discount: Decimal = Decimal('0'),
    ) -> 'Bill':
        bill = cls(
            id=generate_uuid7(),
            order_id=order_id,
            total_amount=total_amount,
            tax=tax,
            discount=discount,
        )
        bill.validate()
        bill.calculate_final_amount()
        return bill

    def validate(self) -> None:
        if self.total_amount < 0 or self.tax < 0 or self.discount < 0:
            raise DomainError('Bill amounts cannot be negative.')

    def calculate_final_amount(self) -> Decimal:
        self.final_amount = self.total_amount + self.tax - self.discount
        return self.final_amount

    def apply_changes(
        self, *, order_id: UUID, total_amount: Decimal, tax: Decimal, discount: Decimal
    ) -> None:
        self.order_id = order_id
        self.total_amount = total_amount
        self.tax = tax
        self.discount = discount
        self.validate()
        self.calculate_final_amount()

    def ensure_covers(self, amount: Decimal) -> None:
        if self.final_amount < amount:
            raise BadRequestError('Insufficient funds.')
