"""
In-memory Booking State Store

One re-entrant lock guards the aggregate of all four repositories; every
engine operation, reads included, runs inside it.
"""

from contextlib import contextmanager
import threading
from typing import Iterator

from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.driven_adapter.repo.in_memory_booking_repo import (
    InMemoryBookingRepo,
)
from src.service.conference_booking.driven_adapter.repo.in_memory_conference_repo import (
    InMemoryConferenceRepo,
)
from src.service.conference_booking.driven_adapter.repo.in_memory_user_repo import (
    InMemoryUserRepo,
)
from src.service.conference_booking.driven_adapter.repo.in_memory_waitlist_repo import (
    InMemoryWaitlistRepo,
)


class BookingStateStoreImpl(IBookingStateStore):
    def __init__(self) -> None:
        self.conferences = InMemoryConferenceRepo()
        self.users = InMemoryUserRepo()
        self.bookings = InMemoryBookingRepo()
        self.waitlists = InMemoryWaitlistRepo()
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self) -> Iterator['BookingStateStoreImpl']:
        # No timeout: callers block until the section is free
        self._lock.acquire()
        try:
            yield self
        finally:
            self._lock.release()
