from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    VALIDATION = 'validation'
    DUPLICATE = 'duplicate'
    DUPLICATE_BOOKING = 'duplicate_booking'
    NOT_FOUND = 'not_found'
    ALREADY_CANCELED = 'already_canceled'
    ALREADY_STARTED = 'already_started'
    NOT_WAITLISTED = 'not_waitlisted'
    CONFLICT = 'conflict'
    NO_SLOT = 'no_slot'


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    kind: ErrorKind

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context: dict[str, Any] = context
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ', '.join(f'{key}={value}' for key, value in self.context.items())
        return f'{self.message} ({details})'


class ValidationError(CustomBaseError):
    kind = ErrorKind.VALIDATION


class DuplicateError(CustomBaseError):
    kind = ErrorKind.DUPLICATE


class DuplicateBookingError(CustomBaseError):
    kind = ErrorKind.DUPLICATE_BOOKING


class NotFoundError(CustomBaseError):
    kind = ErrorKind.NOT_FOUND


class AlreadyCanceledError(CustomBaseError):
    kind = ErrorKind.ALREADY_CANCELED


class AlreadyStartedError(CustomBaseError):
    kind = ErrorKind.ALREADY_STARTED


class NotWaitlistedError(CustomBaseError):
    kind = ErrorKind.NOT_WAITLISTED


class ConflictError(CustomBaseError):
    kind = ErrorKind.CONFLICT


class NoSlotError(CustomBaseError):
    kind = ErrorKind.NO_SLOT
