"""Domain Events"""

from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingCanceledEvent,
    BookingConfirmedEvent,
    BookingCreatedEvent,
    BookingDomainEvent,
    BookingRequeuedEvent,
    ConfirmationDeadlineSetEvent,
    SlotFreedEvent,
)

__all__ = [
    'BookingCanceledEvent',
    'BookingConfirmedEvent',
    'BookingCreatedEvent',
    'BookingDomainEvent',
    'BookingRequeuedEvent',
    'ConfirmationDeadlineSetEvent',
    'SlotFreedEvent',
]
