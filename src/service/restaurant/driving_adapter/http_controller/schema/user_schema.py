"""
User API Schemas - Pydantic models for request/response
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, SecretStr

from src.service.restaurant.app.dto.user_dto import CreateUserDto, UpdateUserDto
from src.service.restaurant.domain.entity.user_entity import UserRole


class CreateUserRequest(BaseModel):
    """Anyone may register a customer; other roles need an admin token."""

    model_config = {
        'json_schema_extra': {
            'example': {
                'email': 'user@example.com',
                'password': 'P@ssw0rd',
                'name': 'John Doe',
                'role': 'customer',
            }
        }
    }

    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=8,
        max_length=72,
        description='Password must be 8-72 characters (bcrypt limit)',
    )
    name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.CUSTOMER

    def to_dto(self) -> CreateUserDto:
        return CreateUserDto(
            email=self.email,
            password=self.password.get_secret_value(),
            name=self.name,
            role=self.role,
        )


class UpdateUserRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {'email': 'new@example.com', 'name': 'John Doe', 'password': 'N3wP@ss!'}
        }
    }

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=100)
    password: Optional[SecretStr] = Field(None, min_length=8, max_length=72)

    def to_dto(self) -> UpdateUserDto:
        return UpdateUserDto(
            email=self.email,
            name=self.name,
            password=self.password.get_secret_value() if self.password else None,
        )


class LoginRequest(BaseModel):
    """User login request schema"""

    model_config = {
        'json_schema_extra': {'example': {'email': 'user@example.com', 'password': 'P@ssw0rd'}}
    }

    email: EmailStr
    password: SecretStr = Field(
        ..., min_length=1, max_length=72, description='User password (max 72 chars)'
    )


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = 'bearer'


class UserResponse(BaseModel):
    model_config = {
        'from_attributes': True,
        'json_schema_extra': {
            'example': {
                'id': '01936d90-0000-7000-8000-000000000001',
                'email': 'user@example.com',
                'name': 'John Doe',
                'role': 'customer',
                'is_active': True,
            }
        },
    }

    id: UUID
    email: str
    name: str
    role: UserRole
    is_active: bool
