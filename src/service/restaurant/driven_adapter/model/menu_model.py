from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


class MenuModel(Base):
    __tablename__ = 'menu'

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    items: Mapped[List['MenuItemModel']] = relationship(
        'MenuItemModel',
        back_populates='menu',
        cascade='all, delete-orphan',
        passive_deletes=True,
        lazy='selectin',
    )

    def __repr__(self):
        return f'<MenuModel(id={self.id}, name={self.name})>'


class MenuItemModel(Base):
    __tablename__ = 'menu_item'

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    menu_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey('menu.id', ondelete='CASCADE'), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    menu: Mapped['MenuModel'] = relationship('MenuModel', back_populates='items', lazy='noload')

    def __repr__(self):
        return f'<MenuItemModel(id={self.id}, name={self.name}, price={self.price})>'
