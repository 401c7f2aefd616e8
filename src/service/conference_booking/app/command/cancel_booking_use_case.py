from uuid_utils import UUID

from src.platform.exception.exceptions import AlreadyStartedError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_event_publisher import (
    IBookingEventPublisher,
)
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.app.interface.i_clock import IClock
from src.service.conference_booking.app.service.waitlist_service import WaitlistService
from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingCanceledEvent,
    SlotFreedEvent,
)
from src.service.conference_booking.domain.enum.booking_status import BookingStatus
from src.service.conference_booking.domain.enum.cancel_reason import CancelReason


class CancelBookingUseCase:
    """
    Cancel a booking on the owner's request.

    A CONFIRMED booking gives its seat back and the waitlist head is offered
    the slot (deadline stamped, not confirmed). A WAITLISTED booking leaves
    its queue, and a pending offer it held passes to the next in line.
    """

    def __init__(
        self,
        *,
        state_store: IBookingStateStore,
        clock: IClock,
        event_publisher: IBookingEventPublisher,
        waitlist_service: WaitlistService,
    ) -> None:
        self.state_store = state_store
        self.clock = clock
        self.event_publisher = event_publisher
        self.waitlist_service = waitlist_service

    @Logger.io
    def cancel(self, *, booking_id: UUID) -> bool:
        """
        Raises:
            NotFoundError: Unknown booking
            AlreadyCanceledError: Booking is already canceled
            AlreadyStartedError: Conference has already started
        """
        with self.state_store.exclusive() as state:
            booking = state.bookings.get_by_id(booking_id=booking_id)
            if booking is None:
                raise NotFoundError('Booking not found', booking_id=booking_id)

            now = self.clock.now()
            canceled = booking.cancel(now=now)

            conference_name = booking.conference_name
            if state.conferences.has_started(name=conference_name, now=now):
                raise AlreadyStartedError(
                    'Cannot cancel booking after conference has started',
                    booking_id=booking_id,
                    conference_name=conference_name,
                )

            state.bookings.save(booking=canceled)
            state.users.remove_booking(user_id=booking.user_id, booking_id=booking_id)

            if booking.status == BookingStatus.CONFIRMED:
                state.conferences.release_slot(name=conference_name)
                conference = state.conferences.get(name=conference_name)
                assert conference is not None
                self.event_publisher.publish(
                    event=SlotFreedEvent(
                        conference_name=conference_name,
                        available_slots=conference.available_slots,
                    )
                )
                self.waitlist_service.process_waitlist(
                    state=state, conference_name=conference_name
                )
            elif booking.status == BookingStatus.WAITLISTED:
                state.waitlists.remove(conference_name=conference_name, booking_id=booking_id)
                self.waitlist_service.reoffer_withdrawn_slot(state=state, withdrawn=booking)

            self.event_publisher.publish(
                event=BookingCanceledEvent(
                    booking_id=booking_id,
                    user_id=booking.user_id,
                    conference_name=conference_name,
                    previous_status=booking.status,
                    reason=CancelReason.USER_REQUEST,
                )
            )
            return True
