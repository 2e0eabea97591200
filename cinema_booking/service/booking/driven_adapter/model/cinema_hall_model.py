from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cinema_booking.platform.database.orm_db_setting import Base


class CinemaHallModel(Base):
    __tablename__ = 'cinema_hall'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cinema_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
