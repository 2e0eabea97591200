from decimal import Decimal

import pytest

from cinema_booking.platform.exception.exceptions import PriceFactorMissingError
from cinema_booking.service.booking.domain.pricing_domain import calc_total_price
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosWithType
from test.service.booking.fixtures import C, S, V, build_factor, build_movie_session


@pytest.mark.unit
class TestCalcTotalPrice:
    def test_vip_seat_uses_its_multiplier(self):
        total = calc_total_price(
            [SeatPosWithType(row=0, col=1, type=V)],
            [build_factor(V, '2.0')],
            build_movie_session(base_price='10'),
            default_factor=Decimal('1'),
        )

        assert total == Decimal('20.00')

    def test_total_is_sum_over_seats(self):
        # 10 x 2.0 + 10 x 1.0
        total = calc_total_price(
            [SeatPosWithType(row=0, col=1, type=V), SeatPosWithType(row=0, col=0, type=S)],
            [build_factor(V, '2.0'), build_factor(S, '1.0')],
            build_movie_session(base_price='10'),
            default_factor=Decimal('1'),
        )

        assert total == Decimal('30.00')

    def test_missing_factor_falls_back_to_configured_default(self):
        total = calc_total_price(
            [SeatPosWithType(row=0, col=0, type=C)],
            [build_factor(V, '2.0')],
            build_movie_session(base_price='12.50'),
            default_factor=Decimal('1.2'),
        )

        assert total == Decimal('15.00')

    def test_missing_factor_without_default_fails(self):
        with pytest.raises(PriceFactorMissingError) as exc_info:
            calc_total_price(
                [SeatPosWithType(row=0, col=0, type=C)],
                [build_factor(V, '2.0')],
                build_movie_session(),
                default_factor=None,
            )

        assert 'couple' in exc_info.value.message

    def test_total_is_rounded_half_up_to_cents(self):
        total = calc_total_price(
            [SeatPosWithType(row=0, col=0, type=V)],
            [build_factor(V, '1.125')],
            build_movie_session(base_price='9.99'),
            default_factor=Decimal('1'),
        )

        # 9.99 x 1.125 = 11.23875
        assert total == Decimal('11.24')

    def test_no_seats_cost_nothing(self):
        total = calc_total_price([], [], build_movie_session(), default_factor=Decimal('1'))

        assert total == Decimal('0.00')
