from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.restaurant.driven_adapter.model.user_model import UserModel


class ReservationModel(Base):
    __tablename__ = 'reservation'
    __table_args__ = (
        Index('ix_reservation_table_time', 'table_id', 'reservation_time'),
    )

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)  # UUID7
    table_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey('dining_table.id'), nullable=False
    )
    user_id: Mapped[Optional[UUID]] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey('app_user.id'), nullable=True, index=True
    )
    guest_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    guest_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    guest_phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    number_of_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # Restaurant-local wall clock
    reservation_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    user: Mapped[Optional['UserModel']] = relationship(
        'UserModel', back_populates='reservations', lazy='noload'
    )

    def __repr__(self):
        return (
            f'<ReservationModel(id={self.id}, table_id={self.table_id}, '
            f'reservation_time={self.reservation_time})>'
        )
