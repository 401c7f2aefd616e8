"""Booking Status Enum"""

from enum import StrEnum


class BookingStatus(StrEnum):
    CONFIRMED = 'confirmed'
    WAITLISTED = 'waitlisted'
    CANCELED = 'canceled'
