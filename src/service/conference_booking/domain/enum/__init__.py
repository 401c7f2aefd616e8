"""Conference Booking Domain Enums"""

from src.service.conference_booking.domain.enum.booking_status import BookingStatus
from src.service.conference_booking.domain.enum.cancel_reason import CancelReason

__all__ = ['BookingStatus', 'CancelReason']
