"""Errors raised by the booking core.

Each carries a single human-readable message; the API layer renders it as
``{"error": message}`` with ``status_code``.
"""


class BookingError(Exception):
    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookingError):
    """Malformed or missing input."""

    status_code = 422


class BusinessHoursError(BookingError):
    """Interval outside the business window or with non-positive duration."""

    status_code = 422


class OverlapError(BookingError):
    """Interval collides with another task of the same owner."""

    status_code = 409


class NotFoundError(BookingError):
    """Target task does not exist or belongs to another owner."""

    status_code = 404


class CancelledError(BookingError):
    """Booking aborted by timeout before it could commit."""

    status_code = 504
