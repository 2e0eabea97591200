"""
Booking Command Repository Interface

Every write runs on the session owned by the surrounding unit of work;
nothing here commits.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from cinema_booking.service.booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create_booking_with_seats(self, *, booking: Booking, seat_ids: List[int]) -> Booking:
        """
        Insert the booking row, then one seat_on_booking row per seat

        Raises:
            SeatAlreadyBookedError: a seat is already booked for the session
                (unique constraint on movie_session_id + seat_id)
        """
        pass

    @abstractmethod
    async def delete_booking_with_seats(self, *, booking_id: int) -> Optional[Booking]:
        """
        Delete the seat associations, then the booking row

        Returns:
            The deleted booking, or None if it did not exist
        """
        pass

    @abstractmethod
    async def delete_bookings_for_session_and_user(
        self, *, user_id: int, movie_session_id: int
    ) -> int:
        """Bulk variant of delete_booking_with_seats; returns the number of bookings removed"""
        pass
