from uuid_utils import UUID

from src.platform.exception.exceptions import (
    AlreadyStartedError,
    ConflictError,
    NoSlotError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_event_publisher import (
    IBookingEventPublisher,
)
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.app.interface.i_clock import IClock
from src.service.conference_booking.app.service.waitlist_service import WaitlistService
from src.service.conference_booking.domain.conflict_detector import find_conflicting_booking
from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingConfirmedEvent,
)
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class ConfirmWaitlistedBookingUseCase:
    """
    Second phase of waitlist promotion: the owner accepts an offered slot.

    Outcomes:
    - conference started: every waitlisted booking of the conference is canceled,
      then AlreadyStartedError
    - deadline passed (or never offered): requeued to the back, returns False
    - otherwise: conflict re-check, take a seat, CONFIRMED, returns True
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
    def confirm(self, *, booking_id: UUID) -> bool:
        with self.state_store.exclusive() as state:
            booking = state.bookings.get_by_id(booking_id=booking_id)
            if booking is None:
                raise NotFoundError('Booking not found', booking_id=booking_id)
            booking.validate_is_waitlisted()

            conference_name = booking.conference_name
            conference = state.conferences.get(name=conference_name)
            assert conference is not None, f'Conference {conference_name} missing'

            now = self.clock.now()
            if conference.has_started(now=now):
                self.waitlist_service.cancel_all_waitlisted(
                    state=state, conference_name=conference_name
                )
                raise AlreadyStartedError(
                    'Cannot confirm booking after conference has started',
                    booking_id=booking_id,
                    conference_name=conference_name,
                )

            if booking.is_confirmation_deadline_passed(now=now):
                Logger.base.info(f'⌛ [CONFIRM] Confirmation deadline passed for {booking_id}')
                self.waitlist_service.requeue_to_back(state=state, booking=booking)
                if conference.has_slot_available():
                    self.waitlist_service.process_waitlist(
                        state=state, conference_name=conference_name
                    )
                return False

            # The user's schedule may have changed since the booking was queued
            user = state.users.get(user_id=booking.user_id)
            assert user is not None, f'User {booking.user_id} missing'
            conflicting = find_conflicting_booking(
                user=user,
                candidate=conference,
                get_booking=lambda bid: state.bookings.get_by_id(booking_id=bid),
                get_conference=lambda name: state.conferences.get(name=name),
            )
            if conflicting is not None:
                raise ConflictError(
                    'User now has a conflicting booking',
                    booking_id=booking_id,
                    conference_name=conference_name,
                    conflicting_booking_id=conflicting.id,
                    conflicting_conference_name=conflicting.conference_name,
                )

            if not state.conferences.try_acquire_slot(name=conference_name):
                raise NoSlotError(
                    'No slots available', booking_id=booking_id, conference_name=conference_name
                )

            state.waitlists.remove(conference_name=conference_name, booking_id=booking_id)
            confirmed = state.bookings.save(booking=booking.confirm(now=now))
            state.users.update_status(
                user_id=booking.user_id, booking_id=booking_id, status=BookingStatus.CONFIRMED
            )
            self.event_publisher.publish(
                event=BookingConfirmedEvent(
                    booking_id=confirmed.id,
                    user_id=confirmed.user_id,
                    conference_name=conference_name,
                )
            )

            self.waitlist_service.remove_from_overlapping_waitlists(
                state=state, user_id=booking.user_id, booked=conference, triggered_by=booking_id
            )
            return True
