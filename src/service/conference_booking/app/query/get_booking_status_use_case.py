from uuid_utils import UUID

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.dto.booking_status_view import BookingStatusView
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class GetBookingStatusUseCase:
    """
    Read-only status lookup.

    Runs inside the same exclusive section as the commands, so it never
    observes a booking mid-transition.
    """

    def __init__(self, *, state_store: IBookingStateStore) -> None:
        self.state_store = state_store

    @Logger.io
    def get_status(self, *, booking_id: UUID) -> BookingStatus:
        return self.get_status_view(booking_id=booking_id).status

    @Logger.io
    def get_status_view(self, *, booking_id: UUID) -> BookingStatusView:
        with self.state_store.exclusive() as state:
            booking = state.bookings.get_by_id(booking_id=booking_id)
            if not booking:
                raise NotFoundError('Booking not found', booking_id=booking_id)

            deadline = None
            if booking.status == BookingStatus.WAITLISTED and state.conferences.has_slot_available(
                name=booking.conference_name
            ):
                deadline = booking.confirmation_deadline
                if deadline is not None:
                    Logger.base.info(
                        f'🎟️ [STATUS] Slot is available for confirmation of {booking_id} '
                        f'until {deadline.isoformat()}'
                    )

            return BookingStatusView(
                booking_id=booking.id, status=booking.status, confirmation_deadline=deadline
            )
