from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import List

from cinema_booking.service.booking.domain.entity.physical_seat_entity import PhysicalSeat
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition


class ICinemaHallSeatingQueryRepo(ABC):
    """Read access to the static physical layout of cinema halls"""

    @abstractmethod
    async def exists(self, *, cinema_hall_id: int) -> bool:
        pass

    @abstractmethod
    async def get_hall_seating_schema(self, *, cinema_hall_id: int) -> List[PhysicalSeat]:
        """
        Get every persisted cell of the hall grid, gaps included, in row-major order

        Raises:
            NotFoundError: hall does not exist
        """
        pass

    @abstractmethod
    async def resolve_positions_to_seat_ids(
        self, *, cinema_hall_id: int, positions: Sequence[SeatPosition]
    ) -> List[int]:
        """
        Map booking-space positions to persisted seat ids, in input order

        Positions with no persisted seat are omitted from the result.
        """
        pass
