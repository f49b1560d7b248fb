from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class BillRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'order_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'total_amount': '1000.00',
                'tax': '50.00',
                'discount': '100.00',
            }
        }
    }

    order_id: UUID
    total_amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    tax: Decimal = Field(Decimal('0'), ge=0, max_digits=12, decimal_places=2)
    discount: Decimal = Field(Decimal('0'), ge=0, max_digits=12, decimal_places=2)


class BillResponse(BaseModel):
    model_config = {'from_attributes': True}

    id: UUID
    order_id: UUID
    total_amount: Decimal
    tax: Decimal
    discount: Decimal
    final_amount: Decimal
    created_at: Optional[datetime] = None
