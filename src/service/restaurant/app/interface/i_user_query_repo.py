from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.restaurant.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User Query Repository Abstract Interface - Handles read operations"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        """Active users only; soft-deleted accounts are invisible."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def list_active(self) -> List[UserEntity]:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str, *, exclude_id: Optional[UUID] = None) -> bool:
        """Counts soft-deleted accounts too, the email column is unique."""
        pass

    @abstractmethod
    async def verify_password(self, email: str, plain_password: str) -> Optional[UserEntity]:
        pass
