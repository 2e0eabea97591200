from abc import ABC, abstractmethod
from typing import List

from cinema_booking.service.booking.domain.entity.physical_seat_entity import PhysicalSeat
from cinema_booking.service.booking.domain.value_object.booking_schema_entry import (
    SourceBookingSchema,
)
from cinema_booking.service.booking.domain.value_object.seat_position import LayoutCell


class ICinemaHallSeatingCommandRepo(ABC):
    @abstractmethod
    async def has_seats(self, *, cinema_hall_id: int) -> bool:
        pass

    @abstractmethod
    async def create_hall_seats(
        self,
        *,
        cinema_hall_id: int,
        cells: List[LayoutCell],
        source_booking_schema: SourceBookingSchema,
    ) -> List[PhysicalSeat]:
        """
        Persist every grid cell; bookable cells take their booking
        coordinates from the source booking schema, gaps get none.
        """
        pass
