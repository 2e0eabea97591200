class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class SeatNotInSchemaError(DomainError):
    """A requested seat position is not a bookable seat of the hall"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class PriceFactorMissingError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatAlreadyBookedError(ConflictError):
    """Seat is already taken for the movie session (checked or enforced by unique constraint)"""


class TransactionFailureError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)
