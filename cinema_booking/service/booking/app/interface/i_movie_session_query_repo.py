from abc import ABC, abstractmethod
from typing import List, Optional

from cinema_booking.service.booking.domain.entity.movie_session_entity import (
    MovieSession,
    MovieSessionMultiFactor,
)


class IMovieSessionQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, movie_session_id: int) -> Optional[MovieSession]:
        pass

    @abstractmethod
    async def get_multi_factors(self, *, movie_session_id: int) -> List[MovieSessionMultiFactor]:
        """Per-seat-type price multipliers configured for the session"""
        pass
