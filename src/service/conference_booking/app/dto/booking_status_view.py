"""Booking status view DTO."""

from datetime import datetime
from typing import Optional

import attrs
from uuid_utils import UUID

from src.service.conference_booking.domain.enum.booking_status import BookingStatus


@attrs.define(frozen=True)
class BookingStatusView:
    """
    Status of a booking as shown to its owner.

    confirmation_deadline is only set while the booking is WAITLISTED and a
    slot is currently available, i.e. when the user can act on it.
    """

    booking_id: UUID
    status: BookingStatus
    confirmation_deadline: Optional[datetime] = None
