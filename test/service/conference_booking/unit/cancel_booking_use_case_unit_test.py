"""
Unit tests for CancelBookingUseCase

Test Focus:
1. CONFIRMED cancel returns the seat and offers it to the waitlist head
2. WAITLISTED cancel leaves the queue and passes on any offer it held
3. Fail Fast: unknown booking, already canceled, conference started
"""

from datetime import timedelta
from typing import Callable

import pytest
from uuid_utils import UUID

from src.platform.exception.exceptions import (
    AlreadyCanceledError,
    AlreadyStartedError,
    NotFoundError,
)
from src.service.conference_booking.app.booking_engine import BookingEngine
from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingCanceledEvent,
    ConfirmationDeadlineSetEvent,
    SlotFreedEvent,
)
from src.service.conference_booking.domain.enum.booking_status import BookingStatus
from src.service.conference_booking.domain.enum.cancel_reason import CancelReason
from src.service.conference_booking.driven_adapter.clock.manual_clock import ManualClock
from src.service.conference_booking.driven_adapter.state.booking_state_store_impl import (
    BookingStateStoreImpl,
)


@pytest.mark.unit
class TestCancelBooking:
    @pytest.fixture(autouse=True)
    def setup(self, engine: BookingEngine, register_conference: Callable) -> None:
        for user_id in ('alice', 'bob', 'carol'):
            engine.register_user(user_id=user_id, topics=[])
        register_conference('PyCon', slots=1)

    def test_cancel_confirmed_without_waitlist_frees_slot(
        self,
        engine: BookingEngine,
        state_store: BookingStateStoreImpl,
        published_events: Callable,
    ) -> None:
        # Arrange
        booking_id = engine.book_conference(user_id='alice', conference_name='PyCon')

        # Act
        result = engine.cancel_booking(booking_id=booking_id)

        # Assert
        assert result is True
        assert engine.get_booking_status(booking_id=booking_id) == BookingStatus.CANCELED
        assert state_store.conferences.get(name='PyCon').available_slots == 1
        assert state_store.users.get(user_id='alice').booking_statuses == {}

        freed = published_events(SlotFreedEvent)
        assert len(freed) == 1
        assert freed[0].available_slots == 1
        assert published_events(ConfirmationDeadlineSetEvent) == []

        canceled = published_events(BookingCanceledEvent)
        assert canceled[0].previous_status == BookingStatus.CONFIRMED
        assert canceled[0].reason == CancelReason.USER_REQUEST

    def test_cancel_confirmed_offers_slot_to_waitlist_head(
        self,
        engine: BookingEngine,
        state_store: BookingStateStoreImpl,
        clock: ManualClock,
        confirmation_window: timedelta,
        published_events: Callable,
    ) -> None:
        """
        Given: alice CONFIRMED, bob then carol WAITLISTED
        When: alice cancels
        Then:
          - The slot is released and stays free until bob confirms
          - bob (head) gets a confirmation deadline but is still WAITLISTED
          - carol is untouched
        """
        # Arrange
        alice_id = engine.book_conference(user_id='alice', conference_name='PyCon')
        bob_id = engine.book_conference(user_id='bob', conference_name='PyCon')
        carol_id = engine.book_conference(user_id='carol', conference_name='PyCon')
        clock.advance(minutes=10)

        # Act
        engine.cancel_booking(booking_id=alice_id)

        # Assert
        bob = engine.get_booking(booking_id=bob_id)
        assert bob.status == BookingStatus.WAITLISTED
        assert bob.confirmation_deadline == clock.now() + confirmation_window
        assert engine.get_booking(booking_id=carol_id).confirmation_deadline is None
        assert state_store.conferences.get(name='PyCon').available_slots == 1
        assert state_store.waitlists.list_ids(conference_name='PyCon') == [bob_id, carol_id]

        offers = published_events(ConfirmationDeadlineSetEvent)
        assert [offer.booking_id for offer in offers] == [bob_id]

    def test_cancel_waitlisted_leaves_queue_only(
        self, engine: BookingEngine, state_store: BookingStateStoreImpl
    ) -> None:
        # Arrange
        engine.book_conference(user_id='alice', conference_name='PyCon')
        bob_id = engine.book_conference(user_id='bob', conference_name='PyCon')
        carol_id = engine.book_conference(user_id='carol', conference_name='PyCon')

        # Act
        engine.cancel_booking(booking_id=bob_id)

        # Assert
        assert engine.get_booking_status(booking_id=bob_id) == BookingStatus.CANCELED
        assert state_store.waitlists.list_ids(conference_name='PyCon') == [carol_id]
        assert state_store.conferences.get(name='PyCon').available_slots == 0
        assert state_store.users.get(user_id='bob').booking_statuses == {}

    def test_cancel_offered_head_passes_offer_to_next_in_line(
        self,
        engine: BookingEngine,
        state_store: BookingStateStoreImpl,
        clock: ManualClock,
        confirmation_window: timedelta,
        published_events: Callable,
    ) -> None:
        """
        Given: alice canceled, so bob (head) holds an offer and carol waits behind him
        When: bob cancels his WAITLISTED booking before the deadline
        Then:
          - carol becomes head and is offered the free slot
          - carol can confirm it
        """
        # Arrange
        alice_id = engine.book_conference(user_id='alice', conference_name='PyCon')
        bob_id = engine.book_conference(user_id='bob', conference_name='PyCon')
        carol_id = engine.book_conference(user_id='carol', conference_name='PyCon')
        engine.cancel_booking(booking_id=alice_id)
        clock.advance(minutes=5)

        # Act
        engine.cancel_booking(booking_id=bob_id)

        # Assert
        carol = engine.get_booking(booking_id=carol_id)
        assert carol.status == BookingStatus.WAITLISTED
        assert carol.confirmation_deadline == clock.now() + confirmation_window
        assert state_store.waitlists.list_ids(conference_name='PyCon') == [carol_id]
        assert state_store.conferences.get(name='PyCon').available_slots == 1

        offers = published_events(ConfirmationDeadlineSetEvent)
        assert [offer.booking_id for offer in offers] == [bob_id, carol_id]

        assert engine.confirm_waitlisted_booking(booking_id=carol_id) is True
        assert engine.get_booking_status(booking_id=carol_id) == BookingStatus.CONFIRMED

    def test_cancel_waitlisted_without_offer_does_not_offer(
        self, engine: BookingEngine, published_events: Callable
    ) -> None:
        # Arrange
        alice_id = engine.book_conference(user_id='alice', conference_name='PyCon')
        bob_id = engine.book_conference(user_id='bob', conference_name='PyCon')
        carol_id = engine.book_conference(user_id='carol', conference_name='PyCon')
        engine.cancel_booking(booking_id=alice_id)

        # Act
        engine.cancel_booking(booking_id=carol_id)

        # Assert
        offers = published_events(ConfirmationDeadlineSetEvent)
        assert [offer.booking_id for offer in offers] == [bob_id]

    def test_unknown_booking(self, engine: BookingEngine) -> None:
        unknown = UUID('00000000-0000-0000-0000-0000000000ff')

        with pytest.raises(NotFoundError) as exc_info:
            engine.cancel_booking(booking_id=unknown)

        assert exc_info.value.context['booking_id'] == unknown

    def test_second_cancel_raises_and_changes_nothing(
        self, engine: BookingEngine, state_store: BookingStateStoreImpl
    ) -> None:
        """
        Given: A canceled booking
        When: It is canceled again
        Then: AlreadyCanceledError, and the released slot is not released twice
        """
        booking_id = engine.book_conference(user_id='alice', conference_name='PyCon')
        engine.cancel_booking(booking_id=booking_id)

        with pytest.raises(AlreadyCanceledError):
            engine.cancel_booking(booking_id=booking_id)

        assert state_store.conferences.get(name='PyCon').available_slots == 1

    def test_cancel_after_start_is_rejected(
        self,
        engine: BookingEngine,
        state_store: BookingStateStoreImpl,
        clock: ManualClock,
    ) -> None:
        # Arrange
        booking_id = engine.book_conference(user_id='alice', conference_name='PyCon')
        clock.advance(days=2)

        # Act & Assert
        with pytest.raises(AlreadyStartedError):
            engine.cancel_booking(booking_id=booking_id)
        assert engine.get_booking_status(booking_id=booking_id) == BookingStatus.CONFIRMED
        assert state_store.conferences.get(name='PyCon').available_slots == 0

    def test_cancel_waitlisted_after_start_is_rejected(
        self,
        engine: BookingEngine,
        state_store: BookingStateStoreImpl,
        clock: ManualClock,
    ) -> None:
        """
        Given: bob WAITLISTED on PyCon
        When: bob cancels after PyCon has started
        Then: AlreadyStartedError, bob stays WAITLISTED and queued
        """
        # Arrange
        engine.book_conference(user_id='alice', conference_name='PyCon')
        bob_id = engine.book_conference(user_id='bob', conference_name='PyCon')
        clock.advance(days=2)

        # Act & Assert
        with pytest.raises(AlreadyStartedError):
            engine.cancel_booking(booking_id=bob_id)
        assert engine.get_booking_status(booking_id=bob_id) == BookingStatus.WAITLISTED
        assert state_store.waitlists.list_ids(conference_name='PyCon') == [bob_id]
        assert bob_id in state_store.users.get(user_id='bob').booking_statuses

    def test_already_canceled_is_reported_before_started(
        self, engine: BookingEngine, clock: ManualClock
    ) -> None:
        booking_id = engine.book_conference(user_id='alice', conference_name='PyCon')
        engine.cancel_booking(booking_id=booking_id)
        clock.advance(days=2)

        with pytest.raises(AlreadyCanceledError):
            engine.cancel_booking(booking_id=booking_id)
