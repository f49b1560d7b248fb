from decimal import Decimal
from typing import List, Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types import generate_uuid7


@attrs.define
class MenuItem:
    menu_id: UUID
    name: str
    price: Decimal
    description: Optional[str] = None
    category: Optional[str] = None  # e.g. Appetizer, Main Course, Dessert
    id: Optional[UUID] = None

    @classmethod
    def create(
        cls,
        *,
        menu_id: UUID,
        name: str,
        price: Decimal,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> 'MenuItem':
        item = cls(
            id=generate_uuid7(),
            menu_id=menu_id,
            name=name,
            price=price,
            description=description,
            category=category,
        )
        item.validate()
        return item

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise DomainError('Menu item name cannot be empty.')
        if self.price < 0:
            raise DomainError('Menu item price cannot be negative.')

    def apply_changes(
        self,
        *,
        menu_id: UUID,
        name: str,
        price: Decimal,
        description: Optional[str],
        category: Optional[str],
    ) -> None:
        self.menu_id = menu_id
        self.name = name
        self.price = price
        self.description = description
        self.category = category
        self.validate()


@attrs.define
class Menu:
    name: str  # e.g. Breakfast, Lunch, Dinner
    id: Optional[UUID] = None
    items: List[MenuItem] = attrs.field(factory=list)

    @classmethod
    def create(cls, *, name: str) -> 'Menu':
        menu = cls(id=generate_uuid7(), name=name)
        menu.rename(name)
        return menu

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise DomainError('Menu name cannot be empty.')
        self.name = name
