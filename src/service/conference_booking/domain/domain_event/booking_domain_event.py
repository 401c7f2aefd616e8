"""
Booking Domain Events

Published to the notification side channel whenever the engine decides a
user must be told something. Delivery is the publisher adapter's concern.
"""

from datetime import datetime
from typing import Optional

import attrs
from uuid_utils import UUID

from src.service.conference_booking.domain.entity.booking_entity import Booking
from src.service.conference_booking.domain.enum.booking_status import BookingStatus
from src.service.conference_booking.domain.enum.cancel_reason import CancelReason


@attrs.define
class BookingCreatedEvent:
    """Domain event fired when a booking is created (confirmed or waitlisted)"""

    booking_id: UUID
    user_id: str
    conference_name: str
    status: BookingStatus

    @classmethod
    def from_booking(cls, *, booking: Booking) -> 'BookingCreatedEvent':
        return cls(
            booking_id=booking.id,
            user_id=booking.user_id,
            conference_name=booking.conference_name,
            status=booking.status,
        )

    def describe(self) -> str:
        return (
            f'Booking {self.booking_id} for user {self.user_id} '
            f'on {self.conference_name} created as {self.status}'
        )


@attrs.define
class SlotFreedEvent:
    conference_name: str
    available_slots: int

    def describe(self) -> str:
        return (
            f'Slot freed on {self.conference_name}. Available slots: {self.available_slots}'
        )


@attrs.define
class ConfirmationDeadlineSetEvent:
    """A waitlisted user may now confirm; the offer lapses at the deadline."""

    booking_id: UUID
    user_id: str
    conference_name: str
    deadline: datetime

    def describe(self) -> str:
        return (
            f'Notifying user {self.user_id} about available slot on {self.conference_name}; '
            f'confirm booking {self.booking_id} before {self.deadline.isoformat()}'
        )


@attrs.define
class BookingConfirmedEvent:
    booking_id: UUID
    user_id: str
    conference_name: str

    def describe(self) -> str:
        return f'Booking {self.booking_id} confirmed for user {self.user_id}'


@attrs.define
class BookingRequeuedEvent:
    """Confirmation came after the deadline; booking moved to the back of the waitlist."""

    booking_id: UUID
    user_id: str
    conference_name: str
    position: int

    def describe(self) -> str:
        return (
            f'Confirmation deadline passed for booking {self.booking_id}; '
            f'requeued at position {self.position} on {self.conference_name}'
        )


@attrs.define
class BookingCanceledEvent:
    booking_id: UUID
    user_id: str
    conference_name: str
    previous_status: BookingStatus
    reason: CancelReason
    triggered_by: Optional[UUID] = None

    def describe(self) -> str:
        suffix = f' (triggered by {self.triggered_by})' if self.triggered_by else ''
        return (
            f'Canceled {self.previous_status} booking {self.booking_id} '
            f'on {self.conference_name}: {self.reason}{suffix}'
        )


BookingDomainEvent = (
    BookingCreatedEvent
    | SlotFreedEvent
    | ConfirmationDeadlineSetEvent
    | BookingConfirmedEvent
    | BookingRequeuedEvent
    | BookingCanceledEvent
)
