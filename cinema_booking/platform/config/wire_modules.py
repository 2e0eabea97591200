"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from cinema_booking.service.booking.app.query import (
    check_seats_availability_use_case,
    get_booking_seating_schema_use_case,
    get_booking_use_case,
    list_user_bookings_use_case,
)
from cinema_booking.service.booking.driving_adapter.http_controller import booking_controller


WIRE_MODULES: list[ModuleType] = [
    get_booking_seating_schema_use_case,
    check_seats_availability_use_case,
    get_booking_use_case,
    list_user_bookings_use_case,
    booking_controller,
]
