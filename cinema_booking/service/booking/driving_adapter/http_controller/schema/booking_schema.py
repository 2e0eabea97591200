from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from cinema_booking.service.booking.domain.enum.seat_type import SeatType
from cinema_booking.service.booking.domain.value_object.seat_position import SeatPosition


class SeatPositionSchema(BaseModel):
    row: int = Field(ge=0)
    col: int = Field(ge=0)

    def to_value_object(self) -> SeatPosition:
        return SeatPosition(row=self.row, col=self.col)


class BookingCreateRequest(BaseModel):
    movie_session_id: int
    seats: List[SeatPositionSchema] = Field(min_length=1)

    model_config = {
        'json_schema_extra': {
            'example': {
                'movie_session_id': 1,
                'seats': [{'row': 0, 'col': 1}, {'row': 0, 'col': 2}],
            }
        },
    }


class SeatsAvailabilityRequest(BaseModel):
    seats: List[SeatPositionSchema] = Field(min_length=1)

    model_config = {'json_schema_extra': {'example': {'seats': [{'row': 0, 'col': 1}]}}}


class SeatsAvailabilityResponse(BaseModel):
    all_seats_are_available: bool
    booked_seats: List[SeatPositionSchema]


class BookingResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'user_id': 2,
                'movie_session_id': 1,
                'total_price': '15.00',
                'currency': 'USD',
                'created_at': '2025-01-10T10:30:00',
            }
        },
    }

    id: int
    user_id: int
    movie_session_id: int
    total_price: Decimal
    currency: str
    created_at: Optional[datetime] = None


class SeatingSchemaEntryResponse(BaseModel):
    seat_id: Optional[int]
    row: int
    col: int
    type: SeatType
    booking_row: Optional[int] = None
    booking_col: Optional[int] = None
    is_booked: bool


class SeatWithTypeResponse(BaseModel):
    row: int
    col: int
    type: SeatType


class UserBookingResponse(BookingResponse):
    cinema_hall_id: int
    seats: List[SeatWithTypeResponse]


class CancelAllBookingsResponse(BaseModel):
    count: int
