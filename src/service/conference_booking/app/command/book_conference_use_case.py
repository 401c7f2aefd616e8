from uuid_utils import UUID

from src.platform.exception.exceptions import (
    AlreadyStartedError,
    ConflictError,
    DuplicateBookingError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_event_publisher import (
    IBookingEventPublisher,
)
from src.service.conference_booking.app.interface.i_booking_id_generator import (
    IBookingIdGenerator,
)
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.app.interface.i_clock import IClock
from src.service.conference_booking.app.service.waitlist_service import WaitlistService
from src.service.conference_booking.domain.conflict_detector import find_conflicting_booking
from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingCreatedEvent,
)
from src.service.conference_booking.domain.entity.booking_entity import Booking
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class BookConferenceUseCase:
    """
    Book a seat on a conference, falling back to its waitlist when full.

    Flow (inside the exclusive section):
    1. Guards: user and conference exist, conference not started, no active
       booking by this user for this conference, no overlapping CONFIRMED booking
    2. Try to take a seat
       - taken: CONFIRMED, then cancel the user's waitlisted bookings on overlapping conferences
       - full: WAITLISTED, appended to the conference's waitlist
    3. Record the booking in the booking store and the user's status map
    """

    def __init__(
        self,
        *,
        state_store: IBookingStateStore,
        clock: IClock,
        booking_id_generator: IBookingIdGenerator,
        event_publisher: IBookingEventPublisher,
        waitlist_service: WaitlistService,
    ) -> None:
        self.state_store = state_store
        self.clock = clock
        self.booking_id_generator = booking_id_generator
        self.event_publisher = event_publisher
        self.waitlist_service = waitlist_service

    @Logger.io
    def book(self, *, user_id: str, conference_name: str) -> UUID:
        """
        Returns:
            Id of the new booking (CONFIRMED or WAITLISTED)

        Raises:
            NotFoundError: Unknown user or conference
            AlreadyStartedError: Conference has already started
            DuplicateBookingError: User already holds an active booking for this conference
            ConflictError: User holds a CONFIRMED booking overlapping this conference
        """
        with self.state_store.exclusive() as state:
            user = state.users.get(user_id=user_id)
            if user is None:
                raise NotFoundError('User not found', user_id=user_id)
            conference = state.conferences.get(name=conference_name)
            if conference is None:
                raise NotFoundError('Conference not found', conference_name=conference_name)

            now = self.clock.now()
            if conference.has_started(now=now):
                raise AlreadyStartedError(
                    'Cannot book conference that has already started',
                    conference_name=conference_name,
                )

            for active_id in user.active_bookings():
                existing = state.bookings.get_by_id(booking_id=active_id)
                if (
                    existing is not None
                    and existing.is_active
                    and existing.conference_name == conference_name
                ):
                    raise DuplicateBookingError(
                        'User already has an active booking for this conference',
                        user_id=user_id,
                        conference_name=conference_name,
                        booking_id=existing.id,
                    )

            conflicting = find_conflicting_booking(
                user=user,
                candidate=conference,
                get_booking=lambda booking_id: state.bookings.get_by_id(booking_id=booking_id),
                get_conference=lambda name: state.conferences.get(name=name),
            )
            if conflicting is not None:
                raise ConflictError(
                    'User has a conflicting booking',
                    user_id=user_id,
                    conference_name=conference_name,
                    conflicting_booking_id=conflicting.id,
                    conflicting_conference_name=conflicting.conference_name,
                )

            booking_id = self.booking_id_generator.generate(
                user_id=user_id, conference_name=conference_name
            )
            slot_acquired = state.conferences.try_acquire_slot(name=conference_name)
            booking = Booking.create(
                id=booking_id,
                user_id=user_id,
                conference_name=conference_name,
                slot_acquired=slot_acquired,
                now=now,
            )
            state.bookings.save(booking=booking)
            state.users.record_booking(
                user_id=user_id, booking_id=booking.id, status=booking.status
            )
            self.event_publisher.publish(event=BookingCreatedEvent.from_booking(booking=booking))

            if booking.status == BookingStatus.CONFIRMED:
                self.waitlist_service.remove_from_overlapping_waitlists(
                    state=state, user_id=user_id, booked=conference, triggered_by=booking.id
                )
            else:
                self.waitlist_service.enqueue(state=state, booking=booking)

            Logger.base.info(
                f'📝 [BOOK] Booking {booking.id} created as {booking.status} '
                f'for user {user_id} on {conference_name}'
            )
            return booking.id
