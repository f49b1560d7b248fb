from uuid import UUID

from pydantic import BaseModel, Field


class DiningTableRequest(BaseModel):
    model_config = {'json_schema_extra': {'example': {'number': 12, 'capacity': 4}}}

    number: int = Field(..., ge=1)
    capacity: int = Field(..., ge=1)


class DiningTableResponse(BaseModel):
    model_config = {'from_attributes': True}

    id: UUID
    number: int
    capacity: int
