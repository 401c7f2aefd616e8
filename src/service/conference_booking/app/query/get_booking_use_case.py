import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(self, *, state_store: IBookingStateStore) -> None:
        self.state_store = state_store

    @Logger.io
    def get_booking(self, *, booking_id: UUID) -> Booking:
        with self.state_store.exclusive() as state:
            booking = state.bookings.get_by_id(booking_id=booking_id)

            if not booking:
                raise NotFoundError('Booking not found', booking_id=booking_id)

            return attrs.evolve(booking)
