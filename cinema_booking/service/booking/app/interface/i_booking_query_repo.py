from abc import ABC, abstractmethod
from typing import List, Optional

from cinema_booking.service.booking.app.dto.user_booking_data import UserBookingData
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def find_booked_seat_positions_for_movie_session(
        self, *, movie_session_id: int
    ) -> List[SeatPosition]:
        """Booking-space positions of every seat currently booked for the session"""
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def find_bookings_data_by_user(self, *, user_id: int) -> List[UserBookingData]:
        pass

    @abstractmethod
    async def find_seat_positions_by_booking_id(self, *, booking_id: int) -> List[SeatPosition]:
        pass
