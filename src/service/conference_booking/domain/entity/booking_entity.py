from datetime import datetime
from typing import Optional

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import AlreadyCanceledError, NotWaitlistedError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


@attrs.define
class Booking:
    id: UUID
    user_id: str
    conference_name: str
    status: BookingStatus
    confirmation_deadline: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: UUID,
        user_id: str,
        conference_name: str,
        slot_acquired: bool,
        now: datetime,
    ) -> 'Booking':
        """
        Create a booking in its initial state.

        Args:
            slot_acquired: Whether a seat was taken for this booking at creation time

        Returns:
            CONFIRMED booking if a seat was acquired, otherwise WAITLISTED
        """
        return cls(
            id=id,
            user_id=user_id,
            conference_name=conference_name,
            status=BookingStatus.CONFIRMED if slot_acquired else BookingStatus.WAITLISTED,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        return self.status != BookingStatus.CANCELED

    def validate_is_waitlisted(self) -> None:
        if self.status != BookingStatus.WAITLISTED:
            raise NotWaitlistedError(
                'Booking is not in waitlisted state',
                booking_id=self.id,
                status=self.status,
            )

    def is_confirmation_deadline_passed(self, *, now: datetime) -> bool:
        """A booking never offered a slot has no deadline and counts as expired."""
        if self.confirmation_deadline is None:
            return True
        return now > self.confirmation_deadline

    @Logger.io
    def offer_slot(self, *, deadline: datetime, now: datetime) -> 'Booking':
        self.validate_is_waitlisted()
        return attrs.evolve(self, confirmation_deadline=deadline, updated_at=now)

    @Logger.io
    def requeue(self, *, now: datetime) -> 'Booking':
        self.validate_is_waitlisted()
        return attrs.evolve(self, confirmation_deadline=None, updated_at=now)

    @Logger.io
    def confirm(self, *, now: datetime) -> 'Booking':
        self.validate_is_waitlisted()
        return attrs.evolve(
            self, status=BookingStatus.CONFIRMED, confirmation_deadline=None, updated_at=now
        )

    @Logger.io
    def cancel(self, *, now: datetime) -> 'Booking':
        """
        Cancel booking (Domain validation)

        Raises:
            AlreadyCanceledError: When booking is already in the terminal state
        """
        if self.status == BookingStatus.CANCELED:
            raise AlreadyCanceledError(
                'Booking is already canceled',
                booking_id=self.id,
                conference_name=self.conference_name,
            )
        return attrs.evolve(
            self, status=BookingStatus.CANCELED, confirmation_deadline=None, updated_at=now
        )
