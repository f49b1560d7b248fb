from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.restaurant.domain.entity.transaction_entity import Transaction


class ITransactionRepo(ABC):
    @abstractmethod
    async def create(self, transaction: Transaction) -> Transaction:
        pass

    @abstractmethod
    async def get_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Transaction]:
        pass

    @abstractmethod
    async def list_by_bill(self, bill_id: UUID) -> List[Transaction]:
        pass
