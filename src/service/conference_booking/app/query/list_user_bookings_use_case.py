from typing import List

import attrs

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.domain.entity.booking_entity import Booking
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class ListUserBookingsUseCase:
    def __init__(self, *, state_store: IBookingStateStore) -> None:
        self.state_store = state_store

    @Logger.io
    def list_bookings(
        self, *, user_id: str, status: BookingStatus | None = None
    ) -> List[Booking]:
        """
        List every booking the user ever made, canceled ones included.

        Args:
            user_id: Owner of the bookings
            status: Optional status filter

        Returns:
            Booking snapshots in creation order
        """
        with self.state_store.exclusive() as state:
            if not state.users.exists(user_id=user_id):
                raise NotFoundError('User not found', user_id=user_id)

            return [
                attrs.evolve(booking)
                for booking in state.bookings.list_by_user(user_id=user_id)
                if status is None or booking.status == status
            ]
