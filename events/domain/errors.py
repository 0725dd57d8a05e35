"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_TIME_VALUES = "INVALID_TIME_VALUES"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    INVALID_SLUG = "INVALID_SLUG"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    REFERENCED_EVENT_NOT_FOUND = "REFERENCED_EVENT_NOT_FOUND"
    UNIQUE_CONSTRAINT_VIOLATION = "UNIQUE_CONSTRAINT_VIOLATION"
    CONNECTION_UNAVAILABLE = "CONNECTION_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a required field is missing or malformed."""

    def __init__(
        self,
        field: str,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ) -> None:
        super().__init__(code=code, message=message)
        self.field = field


class InvalidDateFormatError(ValidationError):
    """Raised when a date cannot be parsed into a calendar instant."""

    def __init__(self, value: str) -> None:
        super().__init__(
            field="date",
            message="Invalid date format; expected a parseable date",
            code=ErrorCode.INVALID_DATE_FORMAT,
        )
        self.value = value


class InvalidTimeFormatError(ValidationError):
    """Raised when a time does not look like HH:MM or HH:MM AM/PM."""

    def __init__(self, value: str) -> None:
        super().__init__(
            field="time",
            message="Invalid time format; expected HH:MM or HH:MM AM/PM",
            code=ErrorCode.INVALID_TIME_FORMAT,
        )
        self.value = value


class InvalidTimeValuesError(ValidationError):
    """Raised when hours or minutes fall outside a 24-hour clock."""

    def __init__(self, value: str) -> None:
        super().__init__(
            field="time",
            message="Invalid time values",
            code=ErrorCode.INVALID_TIME_VALUES,
        )
        self.value = value


class InvalidEmailFormatError(ValidationError):
    """Raised when an email address is malformed."""

    def __init__(self) -> None:
        super().__init__(
            field="email",
            message="Invalid email format",
            code=ErrorCode.INVALID_EMAIL_FORMAT,
        )


class InvalidSlugError(ValidationError):
    """Raised when a slug used for lookup is malformed."""

    def __init__(self) -> None:
        super().__init__(
            field="slug",
            message="Invalid slug format",
            code=ErrorCode.INVALID_SLUG,
        )


class NotFoundError(DomainError):
    """Base for errors about records that do not exist."""


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, lookup: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.lookup = lookup


class BookingNotFoundError(NotFoundError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class ReferencedEventNotFoundError(NotFoundError):
    """Raised when a booking points at an event that does not exist."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.REFERENCED_EVENT_NOT_FOUND,
            message="Referenced Event not found",
        )
        self.event_id = event_id


class UniqueConstraintViolationError(DomainError):
    """Raised by a store when a write collides with a unique index."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.UNIQUE_CONSTRAINT_VIOLATION,
            message=f"Duplicate value for unique field '{field}'",
        )
        self.field = field


class ConnectionUnavailableError(DomainError):
    """Raised when the database is not configured or cannot be reached."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.CONNECTION_UNAVAILABLE,
            message="Database connection unavailable",
        )
        self.reason = reason
