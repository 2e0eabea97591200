"""Seat Type Enum"""

from enum import StrEnum


class SeatType(StrEnum):
    STANDARD = 'standard'
    VIP = 'vip'
    COUPLE = 'couple'
    GAP = 'gap'  # aisle / empty slot in the hall grid, never bookable

    @property
    def is_bookable(self) -> bool:
        return self is not SeatType.GAP
