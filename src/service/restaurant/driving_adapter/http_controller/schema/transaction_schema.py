from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class TransactionRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'bill_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'amount': '950.00',
                'payment_method': 'credit_card',
            }
        }
    }

    bill_id: UUID
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    payment_method: str = Field('cash', min_length=1, max_length=50)


class TransactionResponse(BaseModel):
    model_config = {'from_attributes': True}

    id: UUID
    bill_id: UUID
    amount: Decimal
    payment_method: str
    created_at: Optional[datetime] = None
