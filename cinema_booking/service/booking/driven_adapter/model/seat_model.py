from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from cinema_booking.platform.database.orm_db_setting import Base


class SeatModel(Base):
    """
    One cell of a hall grid.

    `row`/`col` are grid indices; `booking_row`/`booking_col` are the
    booking coordinates (NULL for gaps).
    """

    __tablename__ = 'seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cinema_hall_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('cinema_hall.id', ondelete='CASCADE'), nullable=False, index=True
    )
    row: Mapped[int] = mapped_column(Integer, nullable=False)
    col: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    booking_row: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    booking_col: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        UniqueConstraint('cinema_hall_id', 'row', 'col', name='uq_seat_hall_grid_position'),
        UniqueConstraint(
            'cinema_hall_id', 'booking_row', 'booking_col', name='uq_seat_hall_booking_position'
        ),
    )
