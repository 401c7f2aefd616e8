"""
Booking Engine

Single entry point over the booking use cases. Each call is synchronous and
atomic; errors propagate to the caller as CustomBaseError subclasses.
"""

from datetime import datetime
from typing import List

from uuid_utils import UUID

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
from src.service.conference_booking.app.dto.booking_status_view import BookingStatusView
from src.service.conference_booking.app.dto.conference_availability import (
    ConferenceAvailability,
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
from src.service.conference_booking.domain.entity.booking_entity import Booking
from src.service.conference_booking.domain.entity.conference_entity import Conference
from src.service.conference_booking.domain.entity.user_entity import User
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class BookingEngine:
    def __init__(
        self,
        *,
        register_conference_use_case: RegisterConferenceUseCase,
        register_user_use_case: RegisterUserUseCase,
        book_conference_use_case: BookConferenceUseCase,
        cancel_booking_use_case: CancelBookingUseCase,
        confirm_waitlisted_booking_use_case: ConfirmWaitlistedBookingUseCase,
        get_booking_status_use_case: GetBookingStatusUseCase,
        get_booking_use_case: GetBookingUseCase,
        list_user_bookings_use_case: ListUserBookingsUseCase,
        get_conference_availability_use_case: GetConferenceAvailabilityUseCase,
    ) -> None:
        self._register_conference = register_conference_use_case
        self._register_user = register_user_use_case
        self._book_conference = book_conference_use_case
        self._cancel_booking = cancel_booking_use_case
        self._confirm_waitlisted_booking = confirm_waitlisted_booking_use_case
        self._get_booking_status = get_booking_status_use_case
        self._get_booking = get_booking_use_case
        self._list_user_bookings = list_user_bookings_use_case
        self._get_conference_availability = get_conference_availability_use_case

    # Commands
    def register_conference(
        self,
        *,
        name: str,
        location: str,
        topics: List[str],
        start_time: datetime,
        end_time: datetime,
        total_slots: int,
    ) -> Conference:
        return self._register_conference.register(
            name=name,
            location=location,
            topics=topics,
            start_time=start_time,
            end_time=end_time,
            total_slots=total_slots,
        )

    def register_user(self, *, user_id: str, topics: List[str]) -> User:
        return self._register_user.register(user_id=user_id, topics=topics)

    def book_conference(self, *, user_id: str, conference_name: str) -> UUID:
        return self._book_conference.book(user_id=user_id, conference_name=conference_name)

    def cancel_booking(self, *, booking_id: UUID) -> bool:
        return self._cancel_booking.cancel(booking_id=booking_id)

    def confirm_waitlisted_booking(self, *, booking_id: UUID) -> bool:
        return self._confirm_waitlisted_booking.confirm(booking_id=booking_id)

    # Queries
    def get_booking_status(self, *, booking_id: UUID) -> BookingStatus:
        return self._get_booking_status.get_status(booking_id=booking_id)

    def get_booking_status_view(self, *, booking_id: UUID) -> BookingStatusView:
        return self._get_booking_status.get_status_view(booking_id=booking_id)

    def get_booking(self, *, booking_id: UUID) -> Booking:
        return self._get_booking.get_booking(booking_id=booking_id)

    def list_user_bookings(
        self, *, user_id: str, status: BookingStatus | None = None
    ) -> List[Booking]:
        return self._list_user_bookings.list_bookings(user_id=user_id, status=status)

    def get_conference_availability(self, *, conference_name: str) -> ConferenceAvailability:
        return self._get_conference_availability.get_availability(
            conference_name=conference_name
        )
