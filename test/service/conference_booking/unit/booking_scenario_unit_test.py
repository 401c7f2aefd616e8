"""
End-to-end booking flows through BookingEngine

Each test walks one complete user story over a real in-memory store.
"""

from datetime import timedelta
from typing import Callable

import pytest

from src.platform.exception.exceptions import ConflictError
from src.service.conference_booking.app.booking_engine import BookingEngine
from src.service.conference_booking.domain.domain_event.booking_domain_event import (
    BookingCanceledEvent,
)
from src.service.conference_booking.domain.enum.booking_status import BookingStatus
from src.service.conference_booking.domain.enum.cancel_reason import CancelReason
from src.service.conference_booking.driven_adapter.clock.manual_clock import ManualClock
from src.service.conference_booking.driven_adapter.state.booking_state_store_impl import (
    BookingStateStoreImpl,
)


@pytest.fixture(autouse=True)
def users(engine: BookingEngine) -> None:
    for user_id in ('alice', 'bob', 'carol'):
        engine.register_user(user_id=user_id, topics=['python'])


@pytest.mark.unit
class TestBookingScenarios:
    def test_cancel_offers_slot_and_waitlisted_user_confirms(
        self,
        engine: BookingEngine,
        register_conference: Callable,
        clock: ManualClock,
    ) -> None:
        """
        Given: Conference X with 1 slot, alice CONFIRMED, bob WAITLISTED
        When: alice cancels, then bob confirms before the deadline
        Then:
          - After the cancel bob is still WAITLISTED but holds a deadline
          - After the confirm bob is CONFIRMED and X has 0 slots left
        """
        # Arrange
        register_conference('X', slots=1)
        alice_id = engine.book_conference(user_id='alice', conference_name='X')
        bob_id = engine.book_conference(user_id='bob', conference_name='X')
        assert engine.get_booking_status(booking_id=alice_id) == BookingStatus.CONFIRMED
        assert engine.get_booking_status(booking_id=bob_id) == BookingStatus.WAITLISTED

        # Act
        engine.cancel_booking(booking_id=alice_id)
        offered = engine.get_booking_status_view(booking_id=bob_id)
        clock.advance(minutes=5)
        confirmed = engine.confirm_waitlisted_booking(booking_id=bob_id)

        # Assert
        assert offered.status == BookingStatus.WAITLISTED
        assert offered.confirmation_deadline is not None
        assert confirmed is True
        assert engine.get_booking_status(booking_id=bob_id) == BookingStatus.CONFIRMED
        assert engine.get_conference_availability(conference_name='X').available_slots == 0

    def test_overlapping_conference_is_rejected(
        self, engine: BookingEngine, register_conference: Callable
    ) -> None:
        """
        Given: Two overlapping conferences with 1 slot each
        When: alice books the first, then the second
        Then: Second booking fails with ConflictError
        """
        register_conference('First', slots=1)
        register_conference('Second', slots=1, start_offset=timedelta(days=1, minutes=30))
        engine.book_conference(user_id='alice', conference_name='First')

        with pytest.raises(ConflictError):
            engine.book_conference(user_id='alice', conference_name='Second')

    def test_confirmation_evicts_overlapping_waitlisted_booking(
        self,
        engine: BookingEngine,
        register_conference: Callable,
        state_store: BookingStateStoreImpl,
        published_events: Callable,
    ) -> None:
        """
        Given: alice WAITLISTED on P
        When: alice becomes CONFIRMED on Q, whose window overlaps P
        Then: alice's P booking is CANCELED and removed from P's waitlist
        """
        # Arrange
        register_conference('P', slots=1)
        register_conference('Q', slots=1, start_offset=timedelta(days=1, hours=1))
        engine.book_conference(user_id='bob', conference_name='P')
        p_id = engine.book_conference(user_id='alice', conference_name='P')

        # Act
        q_id = engine.book_conference(user_id='alice', conference_name='Q')

        # Assert
        assert engine.get_booking_status(booking_id=q_id) == BookingStatus.CONFIRMED
        assert engine.get_booking_status(booking_id=p_id) == BookingStatus.CANCELED
        assert state_store.waitlists.size(conference_name='P') == 0
        assert p_id not in state_store.users.get(user_id='alice').booking_statuses

        canceled = published_events(BookingCanceledEvent)
        assert len(canceled) == 1
        assert canceled[0].reason == CancelReason.OVERLAPPING_CONFIRMATION
        assert canceled[0].triggered_by == q_id

    def test_confirmation_via_waitlist_also_evicts_overlapping_entries(
        self,
        engine: BookingEngine,
        register_conference: Callable,
        state_store: BookingStateStoreImpl,
    ) -> None:
        # Arrange
        register_conference('P', slots=1)
        register_conference('Q', slots=1, start_offset=timedelta(days=1, hours=1))
        register_conference('Later', slots=1, start_offset=timedelta(days=2))
        bob_p = engine.book_conference(user_id='bob', conference_name='P')
        engine.book_conference(user_id='carol', conference_name='Q')
        engine.book_conference(user_id='carol', conference_name='Later')
        alice_p = engine.book_conference(user_id='alice', conference_name='P')
        alice_q = engine.book_conference(user_id='alice', conference_name='Q')
        alice_later = engine.book_conference(user_id='alice', conference_name='Later')

        # Act
        engine.cancel_booking(booking_id=bob_p)
        assert engine.confirm_waitlisted_booking(booking_id=alice_p) is True

        # Assert
        assert engine.get_booking_status(booking_id=alice_q) == BookingStatus.CANCELED
        assert engine.get_booking_status(booking_id=alice_later) == BookingStatus.WAITLISTED
        assert state_store.waitlists.list_ids(conference_name='Later') == [alice_later]

    def test_evicted_offer_holder_passes_offer_to_next_in_line(
        self,
        engine: BookingEngine,
        register_conference: Callable,
        state_store: BookingStateStoreImpl,
        clock: ManualClock,
        confirmation_window: timedelta,
    ) -> None:
        """
        Given: P has 1 slot, bob holds the offer on P with carol and dave queued behind
        When: bob confirms on Q, which overlaps P, evicting his P booking
        Then:
          - carol is offered P's free slot and can confirm it
          - dave stays queued behind carol
        """
        # Arrange
        engine.register_user(user_id='dave', topics=['python'])
        register_conference('P', slots=1)
        register_conference('Q', slots=1, start_offset=timedelta(days=1, hours=1))
        alice_id = engine.book_conference(user_id='alice', conference_name='P')
        bob_p = engine.book_conference(user_id='bob', conference_name='P')
        carol_p = engine.book_conference(user_id='carol', conference_name='P')
        dave_p = engine.book_conference(user_id='dave', conference_name='P')
        engine.cancel_booking(booking_id=alice_id)
        clock.advance(minutes=5)

        # Act
        bob_q = engine.book_conference(user_id='bob', conference_name='Q')

        # Assert
        assert engine.get_booking_status(booking_id=bob_q) == BookingStatus.CONFIRMED
        assert engine.get_booking_status(booking_id=bob_p) == BookingStatus.CANCELED
        assert state_store.waitlists.list_ids(conference_name='P') == [carol_p, dave_p]

        carol = engine.get_booking_status_view(booking_id=carol_p)
        assert carol.confirmation_deadline == clock.now() + confirmation_window
        assert engine.confirm_waitlisted_booking(booking_id=carol_p) is True
        assert engine.get_booking_status(booking_id=carol_p) == BookingStatus.CONFIRMED
        assert state_store.waitlists.list_ids(conference_name='P') == [dave_p]

    def test_missed_deadline_moves_booking_to_back(
        self,
        engine: BookingEngine,
        register_conference: Callable,
        state_store: BookingStateStoreImpl,
        clock: ManualClock,
        confirmation_window: timedelta,
    ) -> None:
        """
        Given: bob was offered a slot, carol queued behind him
        When: bob confirms after the deadline
        Then: Confirm returns False, bob is still WAITLISTED at the back
        """
        # Arrange
        register_conference('X', slots=1)
        alice_id = engine.book_conference(user_id='alice', conference_name='X')
        bob_id = engine.book_conference(user_id='bob', conference_name='X')
        carol_id = engine.book_conference(user_id='carol', conference_name='X')
        engine.cancel_booking(booking_id=alice_id)
        clock.advance(seconds=confirmation_window.total_seconds(), minutes=1)

        # Act
        result = engine.confirm_waitlisted_booking(booking_id=bob_id)

        # Assert
        assert result is False
        assert engine.get_booking_status(booking_id=bob_id) == BookingStatus.WAITLISTED
        assert state_store.waitlists.list_ids(conference_name='X') == [carol_id, bob_id]

    def test_missed_deadline_alone_in_queue_gets_fresh_offer(
        self,
        engine: BookingEngine,
        register_conference: Callable,
        clock: ManualClock,
        confirmation_window: timedelta,
    ) -> None:
        register_conference('X', slots=1)
        alice_id = engine.book_conference(user_id='alice', conference_name='X')
        bob_id = engine.book_conference(user_id='bob', conference_name='X')
        engine.cancel_booking(booking_id=alice_id)
        clock.advance(hours=2)

        assert engine.confirm_waitlisted_booking(booking_id=bob_id) is False
        view = engine.get_booking_status_view(booking_id=bob_id)
        assert view.confirmation_deadline == clock.now() + confirmation_window

        assert engine.confirm_waitlisted_booking(booking_id=bob_id) is True
