"""
Booking Event Publisher Interface

Application layer abstraction for the notification side channel.
Use cases decide *that* a user must be notified; delivery belongs to the adapter.
"""

from abc import ABC, abstractmethod

from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingDomainEvent,
)


class IBookingEventPublisher(ABC):
    """
    Port (interface) for publishing booking domain events.

    Called while the state store's exclusive section is held, so
    implementations must not call back into the engine.
    """

    @abstractmethod
    def publish(self, *, event: BookingDomainEvent) -> None:
        """
        Publish a booking domain event.

        Args:
            event: Any booking domain event (created, slot freed, deadline set,
                confirmed, requeued, canceled)
        """
        pass
