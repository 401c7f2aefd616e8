import uuid_utils
from uuid_utils import UUID

from src.service.conference_booking.app.interface.i_booking_id_generator import (
    IBookingIdGenerator,
)


class Uuid7BookingIdGenerator(IBookingIdGenerator):
    """
    Time-ordered UUID7 ids.

    The random tail keeps ids distinct even when the same user re-books the
    same conference within one clock tick.
    """

    def generate(self, *, user_id: str, conference_name: str) -> UUID:
        return uuid_utils.uuid7()
