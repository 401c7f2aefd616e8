"""Application layer interfaces (Ports)"""

from src.service.conference_booking.app.interface.i_booking_event_publisher import (
    IBookingEventPublisher,
)
from src.service.conference_booking.app.interface.i_booking_id_generator import (
    IBookingIdGenerator,
)
from src.service.conference_booking.app.interface.i_booking_repo import IBookingRepo
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.app.interface.i_clock import IClock
from src.service.conference_booking.app.interface.i_conference_repo import IConferenceRepo
from src.service.conference_booking.app.interface.i_user_repo import IUserRepo
from src.service.conference_booking.app.interface.i_waitlist_repo import IWaitlistRepo

__all__ = [
    'IBookingEventPublisher',
    'IBookingIdGenerator',
    'IBookingRepo',
    'IBookingStateStore',
    'IClock',
    'IConferenceRepo',
    'IUserRepo',
    'IWaitlistRepo',
]
