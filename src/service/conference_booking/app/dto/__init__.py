"""Application layer DTOs"""

from src.service.conference_booking.app.dto.booking_status_view import BookingStatusView
from src.service.conference_booking.app.dto.conference_availability import (
    ConferenceAvailability,
)

__all__ = [
    'BookingStatusView',
    'ConferenceAvailability',
]
