"""Booking Domain Value Objects"""

from cinema_booking.service.booking.domain.value_object.booking_schema_entry import (
    ActualBookingSchema,
    ActualBookingSchemaEntry,
    MergedFullCinemaBookingSeatingSchema,
    MergedSeatingSchemaEntry,
    SourceBookingSchema,
    SourceBookingSchemaEntry,
)
from cinema_booking.service.booking.domain.value_object.seat_position import (
    LayoutCell,
    SeatPosition,
    SeatPosWithType,
)

__all__ = [
    'ActualBookingSchema',
    'ActualBookingSchemaEntry',
    'LayoutCell',
    'MergedFullCinemaBookingSeatingSchema',
    'MergedSeatingSchemaEntry',
    'SeatPosWithType',
    'SeatPosition',
    'SourceBookingSchema',
    'SourceBookingSchemaEntry',
]
