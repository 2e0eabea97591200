from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from cinema_booking.platform.database.orm_db_setting import Base


SEAT_CONFLICT_CONSTRAINT = 'uq_seat_on_booking_session_seat'


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    movie_session_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('movie_session.id'), nullable=False, index=True
    )
    total_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class SeatOnBookingModel(Base):
    """
    Seat assigned to a booking.

    movie_session_id is copied from the booking so the store itself refuses
    a second booking of the same seat for the same session.
    """

    __tablename__ = 'seat_on_booking'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('booking.id', ondelete='CASCADE'), nullable=False, index=True
    )
    seat_id: Mapped[int] = mapped_column(Integer, ForeignKey('seat.id'), nullable=False)
    movie_session_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('movie_session.id'), nullable=False
    )

    __table_args__ = (
        UniqueConstraint('movie_session_id', 'seat_id', name=SEAT_CONFLICT_CONSTRAINT),
    )
