"""
Waitlist Service

Waitlist protocol steps shared by the command use cases. Every method expects
to run inside the caller's exclusive section and receives the locked state.

Promotion is two-phase: process_waitlist only offers the freed slot to the
head by stamping a confirmation deadline; the booking stays WAITLISTED until
its owner confirms.
"""

from datetime import timedelta
from typing import List

from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_event_publisher import (
    IBookingEventPublisher,
)
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.app.interface.i_clock import IClock
from src.service.conference_booking.domain.conflict_detector import (
    find_overlapping_conferences,
)
from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingCanceledEvent,
    BookingRequeuedEvent,
    ConfirmationDeadlineSetEvent,
)
from src.service.conference_booking.domain.entity.booking_entity import Booking
from src.service.conference_booking.domain.entity.conference_entity import Conference
from src.service.conference_booking.domain.enum.booking_status import BookingStatus
from src.service.conference_booking.domain.enum.cancel_reason import CancelReason


class WaitlistService:
    def __init__(
        self,
        *,
        clock: IClock,
        event_publisher: IBookingEventPublisher,
        confirmation_window: timedelta,
    ) -> None:
        self.clock = clock
        self.event_publisher = event_publisher
        self.confirmation_window = confirmation_window

    @Logger.io
    def process_waitlist(self, *, state: IBookingStateStore, conference_name: str) -> Booking | None:
        """
        Offer an available slot to the head of the conference's waitlist.

        Returns:
            The head booking with its fresh deadline, or None if nobody is waiting
        """
        head_id = state.waitlists.peek(conference_name=conference_name)
        if head_id is None:
            Logger.base.info(f'📭 [WAITLIST] No users in waitlist for {conference_name}')
            return None

        head = state.bookings.get_by_id(booking_id=head_id)
        assert head is not None, f'Waitlisted booking {head_id} missing from booking store'

        now = self.clock.now()
        offered = state.bookings.save(
            booking=head.offer_slot(deadline=now + self.confirmation_window, now=now)
        )
        assert offered.confirmation_deadline is not None

        self.event_publisher.publish(
            event=ConfirmationDeadlineSetEvent(
                booking_id=offered.id,
                user_id=offered.user_id,
                conference_name=conference_name,
                deadline=offered.confirmation_deadline,
            )
        )
        return offered

    def enqueue(self, *, state: IBookingStateStore, booking: Booking) -> int:
        position = state.waitlists.enqueue(
            conference_name=booking.conference_name, booking_id=booking.id
        )
        Logger.base.info(
            f'⏳ [WAITLIST] Booking {booking.id} queued at position {position} '
            f'on {booking.conference_name}'
        )
        return position

    @Logger.io
    def requeue_to_back(self, *, state: IBookingStateStore, booking: Booking) -> int | None:
        """Move an expired offer to the back of its waitlist and clear the stale deadline."""
        position = state.waitlists.requeue_to_back(
            conference_name=booking.conference_name, booking_id=booking.id
        )
        state.bookings.save(booking=booking.requeue(now=self.clock.now()))

        if position is not None:
            self.event_publisher.publish(
                event=BookingRequeuedEvent(
                    booking_id=booking.id,
                    user_id=booking.user_id,
                    conference_name=booking.conference_name,
                    position=position,
                )
            )
        return position

    @Logger.io
    def remove_from_overlapping_waitlists(
        self, *, state: IBookingStateStore, user_id: str, booked: Conference, triggered_by: UUID
    ) -> List[Booking]:
        """
        Cancel the user's WAITLISTED bookings on every other conference overlapping `booked`.

        Called right after a booking on `booked` becomes CONFIRMED.

        Returns:
            The canceled bookings
        """
        overlapping = find_overlapping_conferences(
            booked=booked, conferences=state.conferences.list_all()
        )

        canceled: List[Booking] = []
        for conference in overlapping:
            for booking_id in state.waitlists.list_ids(conference_name=conference.name):
                booking = state.bookings.get_by_id(booking_id=booking_id)
                if booking is None or booking.user_id != user_id:
                    continue
                canceled.append(
                    self._cancel_waitlisted(
                        state=state,
                        booking=booking,
                        reason=CancelReason.OVERLAPPING_CONFIRMATION,
                        triggered_by=triggered_by,
                    )
                )
                self.reoffer_withdrawn_slot(state=state, withdrawn=booking)
        return canceled

    def reoffer_withdrawn_slot(
        self, *, state: IBookingStateStore, withdrawn: Booking
    ) -> Booking | None:
        """
        Pass a pending offer on once its holder has left the waitlist.

        Args:
            withdrawn: Snapshot of the booking taken before it left the queue

        Returns:
            The new head with its deadline, or None if there was no pending offer
        """
        if withdrawn.confirmation_deadline is None:
            return None
        if not state.conferences.has_slot_available(name=withdrawn.conference_name):
            return None
        return self.process_waitlist(state=state, conference_name=withdrawn.conference_name)

    @Logger.io
    def cancel_all_waitlisted(
        self, *, state: IBookingStateStore, conference_name: str
    ) -> List[Booking]:
        """Cancel every waitlisted booking of a conference that has already started."""
        Logger.base.info(f'🚫 [WAITLIST] Canceling all waitlisted bookings for {conference_name}')

        canceled: List[Booking] = []
        for booking_id in state.waitlists.list_ids(conference_name=conference_name):
            booking = state.bookings.get_by_id(booking_id=booking_id)
            if booking is None:
                continue
            canceled.append(
                self._cancel_waitlisted(
                    state=state, booking=booking, reason=CancelReason.CONFERENCE_STARTED
                )
            )
        return canceled

    def _cancel_waitlisted(
        self,
        *,
        state: IBookingStateStore,
        booking: Booking,
        reason: CancelReason,
        triggered_by: UUID | None = None,
    ) -> Booking:
        state.waitlists.remove(conference_name=booking.conference_name, booking_id=booking.id)
        canceled = state.bookings.save(booking=booking.cancel(now=self.clock.now()))
        state.users.remove_booking(user_id=booking.user_id, booking_id=booking.id)

        self.event_publisher.publish(
            event=BookingCanceledEvent(
                booking_id=booking.id,
                user_id=booking.user_id,
                conference_name=booking.conference_name,
                previous_status=BookingStatus.WAITLISTED,
                reason=reason,
                triggered_by=triggered_by,
            )
        )
        return canceled
