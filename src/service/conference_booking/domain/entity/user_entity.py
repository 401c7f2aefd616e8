from typing import Dict, List

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


DEFAULT_MAX_TOPICS = 50


@attrs.define
class User:
    user_id: str
    interested_topics: List[str] = attrs.field(factory=list)
    booking_statuses: Dict[UUID, BookingStatus] = attrs.field(factory=dict)

    @classmethod
    @Logger.io
    def create(
        cls, *, user_id: str, topics: List[str], max_topics: int = DEFAULT_MAX_TOPICS
    ) -> 'User':
        if not user_id or not user_id.strip():
            raise ValidationError('User id cannot be empty')
        if len(topics) > max_topics:
            raise ValidationError(
                f'Maximum {max_topics} interested topics allowed',
                user_id=user_id,
                topics=len(topics),
            )
        return cls(user_id=user_id, interested_topics=list(topics))

    def record_booking(self, *, booking_id: UUID, status: BookingStatus) -> None:
        self.booking_statuses[booking_id] = status

    def update_status(self, *, booking_id: UUID, status: BookingStatus) -> None:
        # Unknown ids are ignored
        if booking_id in self.booking_statuses:
            self.booking_statuses[booking_id] = status

    def remove_booking(self, *, booking_id: UUID) -> None:
        self.booking_statuses.pop(booking_id, None)

    def active_bookings(self) -> List[UUID]:
        return [
            booking_id
            for booking_id, status in self.booking_statuses.items()
            if status != BookingStatus.CANCELED
        ]
