"""
Conflict Detection Domain

Pure schedule-conflict rules. Only CONFIRMED bookings occupy a user's time;
a user may hold any number of overlapping WAITLISTED bookings but at most one
CONFIRMED booking per overlapping time region.
"""

from typing import Callable, Iterable, List, Optional

from uuid_utils import UUID

from src.service.conference_booking.domain.entity.booking_entity import Booking
from src.service.conference_booking.domain.entity.conference_entity import Conference
from src.service.conference_booking.domain.entity.user_entity import User
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


BookingLookup = Callable[[UUID], Optional[Booking]]
ConferenceLookup = Callable[[str], Optional[Conference]]


def find_conflicting_booking(
    *,
    user: User,
    candidate: Conference,
    get_booking: BookingLookup,
    get_conference: ConferenceLookup,
) -> Optional[Booking]:
    """
    Find the first CONFIRMED booking of the user whose conference overlaps the candidate.

    Returns:
        The conflicting booking, or None if the user is free for the candidate's window
    """
    for booking_id in user.active_bookings():
        booking = get_booking(booking_id)
        if booking is None or booking.status != BookingStatus.CONFIRMED:
            continue

        existing = get_conference(booking.conference_name)
        if existing is not None and existing.overlaps_conference(candidate):
            return booking
    return None


def has_conflicting_booking(
    *,
    user: User,
    candidate: Conference,
    get_booking: BookingLookup,
    get_conference: ConferenceLookup,
) -> bool:
    return (
        find_conflicting_booking(
            user=user,
            candidate=candidate,
            get_booking=get_booking,
            get_conference=get_conference,
        )
        is not None
    )


def find_overlapping_conferences(
    *, booked: Conference, conferences: Iterable[Conference]
) -> List[Conference]:
    """Every other conference whose window overlaps the booked one."""
    return [
        conference
        for conference in conferences
        if conference.name != booked.name and conference.overlaps_conference(booked)
    ]
