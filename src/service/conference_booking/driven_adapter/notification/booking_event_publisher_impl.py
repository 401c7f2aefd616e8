"""
Booking Event Publisher Implementation

Log-based adapter for the notification side channel: each event becomes a
human-readable INFO line plus an orjson payload at DEBUG for downstream
collectors. Real delivery (email, push) would replace this adapter.
"""

import attrs
import orjson

from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_event_publisher import (
    IBookingEventPublisher,
)
from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingDomainEvent,
)


class BookingEventPublisherImpl(IBookingEventPublisher):
    @staticmethod
    def serialize(event: BookingDomainEvent) -> bytes:
        payload = {'event_type': type(event).__name__, **attrs.asdict(event)}
        return orjson.dumps(payload, default=str)

    def publish(self, *, event: BookingDomainEvent) -> None:
        Logger.base.info(f'📣 [NOTIFY] {event.describe()}')
        Logger.base.debug(f'📣 [NOTIFY] payload={self.serialize(event).decode()}')
