from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from cinema_booking.platform.database.orm_db_setting import Base


class MovieSessionModel(Base):
    __tablename__ = 'movie_session'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cinema_hall_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('cinema_hall.id'), nullable=False, index=True
    )
    movie_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    start_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    base_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)


class MovieSessionMultiFactorModel(Base):
    __tablename__ = 'movie_session_multi_factor'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_session_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('movie_session.id', ondelete='CASCADE'), nullable=False, index=True
    )
    type_seat: Mapped[str] = mapped_column(String(20), nullable=False)
    price_factor: Mapped[Decimal] = mapped_column(Numeric(6, 3), nullable=False)

    __table_args__ = (
        UniqueConstraint('movie_session_id', 'type_seat', name='uq_multi_factor_session_type'),
    )
