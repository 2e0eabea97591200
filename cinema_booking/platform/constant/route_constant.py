API_PREFIX = '/api'

BOOKING_PREFIX = f'{API_PREFIX}/booking'

# Booking routes, relative to BOOKING_PREFIX
BOOKING_ROOT = ''
BOOKING_MY_BOOKINGS = '/my_booking'
BOOKING_SESSION_SEATING = '/session/{movie_session_id}/seating'
BOOKING_SESSION_AVAILABILITY = '/session/{movie_session_id}/availability'
BOOKING_SESSION = '/session/{movie_session_id}'
BOOKING_DETAIL = '/{booking_id}'

HEALTH = '/health'

# Header carrying the authenticated user id (set by the upstream auth gateway)
USER_ID_HEADER = 'X-User-Id'
