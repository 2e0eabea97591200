from typing import List, Optional

import attrs
from fastapi import APIRouter, Depends, Header, status
from opentelemetry import trace

from cinema_booking.platform.constant.route_constant import (
    BOOKING_DETAIL,
    BOOKING_MY_BOOKINGS,
    BOOKING_ROOT,
    BOOKING_SESSION,
    BOOKING_SESSION_AVAILABILITY,
    BOOKING_SESSION_SEATING,
    USER_ID_HEADER,
)
from cinema_booking.platform.exception.exceptions import AuthenticationError
from cinema_booking.platform.logging.loguru_io import Logger
from cinema_booking.service.booking.app.command.cancel_all_bookings_for_session_and_user_use_case import (
    CancelAllBookingsForSessionAndUserUseCase,
)
from cinema_booking.service.booking.app.command.cancel_booking_use_case import (
    CancelBookingUseCase,
)
from cinema_booking.service.booking.app.command.create_booking_use_case import (
    CreateBookingUseCase,
)
from cinema_booking.service.booking.app.query.check_seats_availability_use_case import (
    CheckSeatsAvailabilityUseCase,
)
from cinema_booking.service.booking.app.query.get_booking_seating_schema_use_case import (
    GetBookingSeatingSchemaUseCase,
)
from cinema_booking.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from cinema_booking.service.booking.app.query.list_user_bookings_use_case import (
    ListUserBookingsUseCase,
)
from cinema_booking.service.booking.domain.entity.booking_entity import Booking
from cinema_booking.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    CancelAllBookingsResponse,
    SeatingSchemaEntryResponse,
    SeatPositionSchema,
    SeatsAvailabilityRequest,
    SeatsAvailabilityResponse,
    SeatWithTypeResponse,
    UserBookingResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def get_current_user_id(
    user_id: Optional[int] = Header(default=None, alias=USER_ID_HEADER),
) -> int:
    """Identity is resolved upstream; this service only trusts the forwarded header"""
    if user_id is None:
        raise AuthenticationError(f'Missing {USER_ID_HEADER} header')
    return user_id


def _to_booking_response(booking: Booking) -> BookingResponse:
    if booking.id is None:
        raise ValueError('Booking ID should not be None after creation.')
    return BookingResponse(
        id=booking.id,
        user_id=booking.user_id,
        movie_session_id=booking.movie_session_id,
        total_price=booking.total_price,
        currency=booking.currency,
        created_at=booking.created_at,
    )


@router.get(BOOKING_MY_BOOKINGS, response_model=List[UserBookingResponse])
@Logger.io
async def list_my_bookings(
    user_id: int = Depends(get_current_user_id),
    use_case: ListUserBookingsUseCase = Depends(ListUserBookingsUseCase.depends),
) -> List[UserBookingResponse]:
    details = await use_case.execute(user_id=user_id)
    return [
        UserBookingResponse(
            **_to_booking_response(detail.booking).model_dump(),
            cinema_hall_id=detail.cinema_hall_id,
            seats=[SeatWithTypeResponse(row=s.row, col=s.col, type=s.type) for s in detail.seats],
        )
        for detail in details
    ]


@router.get(BOOKING_SESSION_SEATING, response_model=List[SeatingSchemaEntryResponse])
@Logger.io
async def get_session_seating(
    movie_session_id: int,
    use_case: GetBookingSeatingSchemaUseCase = Depends(GetBookingSeatingSchemaUseCase.depends),
) -> List[SeatingSchemaEntryResponse]:
    merged_schema = await use_case.execute(movie_session_id=movie_session_id)
    return [SeatingSchemaEntryResponse(**attrs.asdict(entry)) for entry in merged_schema]


@router.post(BOOKING_SESSION_AVAILABILITY)
@Logger.io
async def check_seats_availability(
    movie_session_id: int,
    request: SeatsAvailabilityRequest,
    use_case: CheckSeatsAvailabilityUseCase = Depends(CheckSeatsAvailabilityUseCase.depends),
) -> SeatsAvailabilityResponse:
    result = await use_case.execute(
        movie_session_id=movie_session_id,
        desired_seats=[seat.to_value_object() for seat in request.seats],
    )
    return SeatsAvailabilityResponse(
        all_seats_are_available=result.all_seats_are_available,
        booked_seats=[SeatPositionSchema(row=s.row, col=s.col) for s in result.booked_seats],
    )


@router.post(BOOKING_ROOT, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('movie_session_id', request.movie_session_id)
        span.set_attribute('user_id', user_id)

        booking = await use_case.create_booking(
            user_id=user_id,
            movie_session_id=request.movie_session_id,
            desired_seats=[seat.to_value_object() for seat in request.seats],
        )

        span.set_attribute('booking.id', booking.id or 0)
        return _to_booking_response(booking)


@router.get(BOOKING_DETAIL)
@Logger.io
async def get_booking(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id, user_id=user_id)
    return _to_booking_response(booking)


@router.delete(BOOKING_DETAIL)
@Logger.io
async def cancel_booking(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.execute(booking_id=booking_id, user_id=user_id)
    return _to_booking_response(booking)


@router.delete(BOOKING_SESSION)
@Logger.io
async def cancel_all_bookings_for_session(
    movie_session_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: CancelAllBookingsForSessionAndUserUseCase = Depends(
        CancelAllBookingsForSessionAndUserUseCase.depends
    ),
) -> CancelAllBookingsResponse:
    result = await use_case.execute(user_id=user_id, movie_session_id=movie_session_id)
    return CancelAllBookingsResponse(count=result.count)
