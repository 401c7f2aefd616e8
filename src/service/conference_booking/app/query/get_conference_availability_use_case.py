from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.dto.conference_availability import (
    ConferenceAvailability,
)
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.app.interface.i_clock import IClock
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class GetConferenceAvailabilityUseCase:
    def __init__(self, *, state_store: IBookingStateStore, clock: IClock) -> None:
        self.state_store = state_store
        self.clock = clock

    @Logger.io
    def get_availability(self, *, conference_name: str) -> ConferenceAvailability:
        with self.state_store.exclusive() as state:
            conference = state.conferences.get(name=conference_name)
            if not conference:
                raise NotFoundError('Conference not found', conference_name=conference_name)

            confirmed = state.bookings.list_by_conference(
                conference_name=conference_name, status=BookingStatus.CONFIRMED
            )
            return ConferenceAvailability(
                conference_name=conference_name,
                total_slots=conference.total_slots,
                available_slots=conference.available_slots,
                confirmed_count=len(confirmed),
                waitlist_length=state.waitlists.size(conference_name=conference_name),
                has_started=conference.has_started(now=self.clock.now()),
            )
