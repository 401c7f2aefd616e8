from typing import Dict, List

from uuid_utils import UUID

from src.service.conference_booking.app.interface.i_booking_repo import IBookingRepo
from src.service.conference_booking.domain.entity.booking_entity import Booking
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class InMemoryBookingRepo(IBookingRepo):
    """Bookings keyed by id; insertion order is creation order."""

    def __init__(self) -> None:
        self._bookings: Dict[UUID, Booking] = {}

    def save(self, *, booking: Booking) -> Booking:
        self._bookings[booking.id] = booking
        return booking

    def get_by_id(self, *, booking_id: UUID) -> Booking | None:
        return self._bookings.get(booking_id)

    def list_by_user(self, *, user_id: str) -> List[Booking]:
        return [booking for booking in self._bookings.values() if booking.user_id == user_id]

    def list_by_conference(
        self, *, conference_name: str, status: BookingStatus | None = None
    ) -> List[Booking]:
        return [
            booking
            for booking in self._bookings.values()
            if booking.conference_name == conference_name
            and (status is None or booking.status == status)
        ]
