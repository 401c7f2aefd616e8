"""
Test Configuration and Fixtures

This module provides:
- Test log directory redirect for DEBUG runs (must happen before application imports)
- A controllable clock so deadline and start-time rules can be exercised
- A fully wired BookingEngine over a fresh in-memory state store per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# loguru_io_config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    # Only used when DEBUG adds the file sink; loguru creates the directory on first write
    os.environ['TEST_LOG_DIR'] = str(Path(__file__).parent / 'test_log')


_early_setup_test_environment()

from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Callable, List  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.service.conference_booking.app.booking_engine import BookingEngine  # noqa: E402
from src.service.conference_booking.app.command.book_conference_use_case import (  # noqa: E402
    BookConferenceUseCase,
)
from src.service.conference_booking.app.command.cancel_booking_use_case import (  # noqa: E402
    CancelBookingUseCase,
)
from src.service.conference_booking.app.command.confirm_waitlisted_booking_use_case import (  # noqa: E402
    ConfirmWaitlistedBookingUseCase,
)
from src.service.conference_booking.app.command.register_conference_use_case import (  # noqa: E402
    RegisterConferenceUseCase,
)
from src.service.conference_booking.app.command.register_user_use_case import (  # noqa: E402
    RegisterUserUseCase,
)
from src.service.conference_booking.app.interface.i_booking_event_publisher import (  # noqa: E402
    IBookingEventPublisher,
)
from src.service.conference_booking.app.query.get_booking_status_use_case import (  # noqa: E402
    GetBookingStatusUseCase,
)
from src.service.conference_booking.app.query.get_booking_use_case import (  # noqa: E402
    GetBookingUseCase,
)
from src.service.conference_booking.app.query.get_conference_availability_use_case import (  # noqa: E402
    GetConferenceAvailabilityUseCase,
)
from src.service.conference_booking.app.query.list_user_bookings_use_case import (  # noqa: E402
    ListUserBookingsUseCase,
)
from src.service.conference_booking.app.service.waitlist_service import (  # noqa: E402
    WaitlistService,
)
from src.service.conference_booking.domain.entity.conference_entity import (  # noqa: E402
    Conference,
)
from src.service.conference_booking.driven_adapter.clock.manual_clock import (  # noqa: E402
    ManualClock,
)
from src.service.conference_booking.driven_adapter.id_generator.uuid7_booking_id_generator import (  # noqa: E402
    Uuid7BookingIdGenerator,
)
from src.service.conference_booking.driven_adapter.state.booking_state_store_impl import (  # noqa: E402
    BookingStateStoreImpl,
)


CONFIRMATION_WINDOW = timedelta(hours=1)
BASE_TIME = datetime(2030, 1, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(start=BASE_TIME)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def state_store() -> BookingStateStoreImpl:
    return BookingStateStoreImpl()


@pytest.fixture
def mock_event_publisher() -> Mock:
    return Mock(spec=IBookingEventPublisher)


@pytest.fixture
def confirmation_window() -> timedelta:
    return CONFIRMATION_WINDOW


@pytest.fixture
def waitlist_service(
    clock: ManualClock, mock_event_publisher: Mock, confirmation_window: timedelta
) -> WaitlistService:
    return WaitlistService(
        clock=clock,
        event_publisher=mock_event_publisher,
        confirmation_window=confirmation_window,
    )


@pytest.fixture
def engine(
    state_store: BookingStateStoreImpl,
    clock: ManualClock,
    mock_event_publisher: Mock,
    waitlist_service: WaitlistService,
    settings: Settings,
) -> BookingEngine:
    return BookingEngine(
        register_conference_use_case=RegisterConferenceUseCase(
            state_store=state_store, settings=settings
        ),
        register_user_use_case=RegisterUserUseCase(state_store=state_store, settings=settings),
        book_conference_use_case=BookConferenceUseCase(
            state_store=state_store,
            clock=clock,
            booking_id_generator=Uuid7BookingIdGenerator(),
            event_publisher=mock_event_publisher,
            waitlist_service=waitlist_service,
        ),
        cancel_booking_use_case=CancelBookingUseCase(
            state_store=state_store,
            clock=clock,
            event_publisher=mock_event_publisher,
            waitlist_service=waitlist_service,
        ),
        confirm_waitlisted_booking_use_case=ConfirmWaitlistedBookingUseCase(
            state_store=state_store,
            clock=clock,
            event_publisher=mock_event_publisher,
            waitlist_service=waitlist_service,
        ),
        get_booking_status_use_case=GetBookingStatusUseCase(state_store=state_store),
        get_booking_use_case=GetBookingUseCase(state_store=state_store),
        list_user_bookings_use_case=ListUserBookingsUseCase(state_store=state_store),
        get_conference_availability_use_case=GetConferenceAvailabilityUseCase(
            state_store=state_store, clock=clock
        ),
    )


@pytest.fixture
def register_conference(engine: BookingEngine) -> Callable[..., Conference]:
    """
    Register a conference relative to BASE_TIME.

    Defaults to a two-hour conference starting one day after BASE_TIME.
    """

    def _register(
        name: str,
        *,
        slots: int = 1,
        start_offset: timedelta = timedelta(days=1),
        duration: timedelta = timedelta(hours=2),
        topics: List[str] | None = None,
    ) -> Conference:
        start_time = BASE_TIME + start_offset
        return engine.register_conference(
            name=name,
            location='Main Hall',
            topics=topics if topics is not None else ['python'],
            start_time=start_time,
            end_time=start_time + duration,
            total_slots=slots,
        )

    return _register


@pytest.fixture
def published_events(mock_event_publisher: Mock) -> Callable[[type], list]:
    """Events of one type handed to the publisher, in publish order."""

    def _published(event_type: type) -> list:
        return [
            call.kwargs['event']
            for call in mock_event_publisher.publish.call_args_list
            if isinstance(call.kwargs['event'], event_type)
        ]

    return _published
