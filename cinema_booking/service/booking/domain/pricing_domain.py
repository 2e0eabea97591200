"""
Pricing Domain

Total price = sum over desired seats of base_price x factor(seat type).
A seat type without a per-session factor row falls back to `default_factor`;
when no default is configured the booking fails with PriceFactorMissingError.
"""

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from cinema_booking.platform.exception.exceptions import PriceFactorMissingError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.domain.entity.movie_session_entity import (
    MovieSession,
    MovieSessionMultiFactor,
)
from cinema_booking.service.booking.domain.enum.seat_type import SeatType
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosWithType


MONEY_QUANTUM = Decimal('0.01')


def _factor_by_type(multi_factors: Iterable[MovieSessionMultiFactor]) -> dict[SeatType, Decimal]:
    return {factor.type_seat: Decimal(factor.price_factor) for factor in multi_factors}


def calc_seat_price(
    seat_type: SeatType,
    factors: dict[SeatType, Decimal],
    base_price: Decimal,
    *,
    default_factor: Optional[Decimal],
) -> Decimal:
    factor = factors.get(seat_type, default_factor)
    if factor is None:
        raise PriceFactorMissingError(f'No price factor for seat type {seat_type}')
    return base_price * factor


@Logger.io
def calc_total_price(
    desired_seats: Sequence[SeatPosWithType],
    multi_factors: Iterable[MovieSessionMultiFactor],
    movie_session: MovieSession,
    *,
    default_factor: Optional[Decimal],
) -> Decimal:
    factors = _factor_by_type(multi_factors)
    base_price = Decimal(movie_session.base_price)
    total = sum(
        (
            calc_seat_price(seat.type, factors, base_price, default_factor=default_factor)
            for seat in desired_seats
        ),
        start=Decimal('0'),
    )
    return total.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
