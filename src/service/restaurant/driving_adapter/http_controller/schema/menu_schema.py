from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class MenuRequest(BaseModel):
    model_config = {'json_schema_extra': {'example': {'name': 'Dinner'}}}

    name: str = Field(..., min_length=1, max_length=255)


class MenuItemRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'menu_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'name': 'Beef Noodle Soup',
                'description': 'Braised beef shank, hand-pulled noodles',
                'price': '280.00',
                'category': 'Main Course',
            }
        }
    }

    menu_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category: Optional[str] = Field(None, max_length=100)


class MenuItemResponse(BaseModel):
    model_config = {'from_attributes': True}

    id: UUID
    menu_id: UUID
    name: str
    description: Optional[str] = None
    price: Decimal
    category: Optional[str] = None


class MenuResponse(BaseModel):
    model_config = {'from_attributes': True}

    id: UUID
    name: str
    items: List[MenuItemResponse] = []
