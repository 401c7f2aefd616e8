"""
Booking State Store Interface

Aggregates every store the engine touches behind one exclusive section, so a
single acquisition covers conferences, users, bookings and waitlists.
"""

from __future__ import annotations

import abc
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from src.service.conference_booking.app.interface.i_booking_repo import IBookingRepo
    from src.service.conference_booking.app.interface.i_conference_repo import IConferenceRepo
    from src.service.conference_booking.app.interface.i_user_repo import IUserRepo
    from src.service.conference_booking.app.interface.i_waitlist_repo import IWaitlistRepo


class IBookingStateStore(abc.ABC):
    """
    Usage:
        with store.exclusive() as state:
            conference = state.conferences.get(name=...)
            state.bookings.save(booking=...)

    Every read or write of the repositories must happen inside exclusive().
    The section is re-entrant and released on every exit path.
    """

    conferences: IConferenceRepo
    users: IUserRepo
    bookings: IBookingRepo
    waitlists: IWaitlistRepo

    @abc.abstractmethod
    def exclusive(self) -> AbstractContextManager[IBookingStateStore]:
        raise NotImplementedError
