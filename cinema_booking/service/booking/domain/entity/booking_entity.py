from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import attrs

from cinema_booking.platform.exception.exceptions import DomainError
from cinema_booking.platform.logging.loguru_io import Logger


@attrs.define
class Booking:
    user_id: int
    movie_session_id: int
    total_price: Decimal
    currency: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        movie_session_id: int,
        total_price: Decimal,
        currency: str,
    ) -> 'Booking':
        if total_price < 0:
            raise DomainError('Total price cannot be negative')
        if not currency:
            raise DomainError('Currency is required')

        return cls(
            user_id=user_id,
            movie_session_id=movie_session_id,
            total_price=total_price,
            currency=currency,
            created_at=datetime.now(timezone.utc),
        )

