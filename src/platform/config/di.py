"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from datetime import timedelta

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.conference_booking.app.booking_engine import BookingEngine
from src.service.conference_booking.app.command.book_conference_use_case import (
    BookConferenceUseCase,
)
from src.service.conference_booking.app.command.cancel_booking_use_case import (
    CancelBookingUseCase,
)
from src.service.conference_booking.app.command.confirm_waitlisted_booking_use_case import (
    ConfirmWaitlistedBookingUseCase,
)
from src.service.conference_booking.app.command.register_conference_use_case import (
    RegisterConferenceUseCase,
)
from src.service.conference_booking.app.command.register_user_use_case import (
    RegisterUserUseCase,
)
from src.service.conference_booking.app.query.get_booking_status_use_case import (
    GetBookingStatusUseCase,
)
from src.service.conference_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.conference_booking.app.query.get_conference_availability_use_case import (
    GetConferenceAvailabilityUseCase,
)
from src.service.conference_booking.app.query.list_user_bookings_use_case import (
    ListUserBookingsUseCase,
)
from src.service.conference_booking.app.service.waitlist_service import WaitlistService
from src.service.conference_booking.driven_adapter.clock.system_clock import SystemClock
from src.service.conference_booking.driven_adapter.id_generator.uuid7_booking_id_generator import (
    Uuid7BookingIdGenerator,
)
from src.service.conference_booking.driven_adapter.notification.booking_event_publisher_impl import (
    BookingEventPublisherImpl,
)
from src.service.conference_booking.driven_adapter.state.booking_state_store_impl import (
    BookingStateStoreImpl,
)


def _seconds(value: int) -> timedelta:
    return timedelta(seconds=value)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Infrastructure
    clock = providers.Singleton(SystemClock)
    booking_id_generator = providers.Singleton(Uuid7BookingIdGenerator)
    booking_event_publisher = providers.Singleton(BookingEventPublisherImpl)

    # All engine state lives behind one lock, so the store must be a Singleton
    state_store = providers.Singleton(BookingStateStoreImpl)

    waitlist_service = providers.Singleton(
        WaitlistService,
        clock=clock,
        event_publisher=booking_event_publisher,
        confirmation_window=providers.Callable(
            _seconds, config_service.provided.WAITLIST_CONFIRMATION_WINDOW_SECONDS
        ),
    )

    # Command use cases
    register_conference_use_case = providers.Singleton(
        RegisterConferenceUseCase, state_store=state_store, settings=config_service
    )
    register_user_use_case = providers.Singleton(
        RegisterUserUseCase, state_store=state_store, settings=config_service
    )
    book_conference_use_case = providers.Singleton(
        BookConferenceUseCase,
        state_store=state_store,
        clock=clock,
        booking_id_generator=booking_id_generator,
        event_publisher=booking_event_publisher,
        waitlist_service=waitlist_service,
    )
    cancel_booking_use_case = providers.Singleton(
        CancelBookingUseCase,
        state_store=state_store,
        clock=clock,
        event_publisher=booking_event_publisher,
        waitlist_service=waitlist_service,
    )
    confirm_waitlisted_booking_use_case = providers.Singleton(
        ConfirmWaitlistedBookingUseCase,
        state_store=state_store,
        clock=clock,
        event_publisher=booking_event_publisher,
        waitlist_service=waitlist_service,
    )

    # Query use cases
    get_booking_status_use_case = providers.Singleton(
        GetBookingStatusUseCase, state_store=state_store
    )
    get_booking_use_case = providers.Singleton(GetBookingUseCase, state_store=state_store)
    list_user_bookings_use_case = providers.Singleton(
        ListUserBookingsUseCase, state_store=state_store
    )
    get_conference_availability_use_case = providers.Singleton(
        GetConferenceAvailabilityUseCase, state_store=state_store, clock=clock
    )

    booking_engine = providers.Singleton(
        BookingEngine,
        register_conference_use_case=register_conference_use_case,
        register_user_use_case=register_user_use_case,
        book_conference_use_case=book_conference_use_case,
        cancel_booking_use_case=cancel_booking_use_case,
        confirm_waitlisted_booking_use_case=confirm_waitlisted_booking_use_case,
        get_booking_status_use_case=get_booking_status_use_case,
        get_booking_use_case=get_booking_use_case,
        list_user_bookings_use_case=list_user_bookings_use_case,
        get_conference_availability_use_case=get_conference_availability_use_case,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.state_store()


def cleanup() -> None:
    container.reset_singletons()
