from typing import Dict, List

from uuid_utils import UUID

from src.platform.exception.exceptions import NotFoundError
from src.service.conference_booking.app.interface.i_user_repo import IUserRepo
from src.service.conference_booking.domain.entity.user_entity import User
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class InMemoryUserRepo(IUserRepo):
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    def _require(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError('User not found', user_id=user_id)
        return user

    def add(self, *, user: User) -> None:
        self._users[user.user_id] = user

    def get(self, *, user_id: str) -> User | None:
        return self._users.get(user_id)

    def exists(self, *, user_id: str) -> bool:
        return user_id in self._users

    def record_booking(self, *, user_id: str, booking_id: UUID, status: BookingStatus) -> None:
        self._require(user_id).record_booking(booking_id=booking_id, status=status)

    def update_status(self, *, user_id: str, booking_id: UUID, status: BookingStatus) -> None:
        self._require(user_id).update_status(booking_id=booking_id, status=status)

    def remove_booking(self, *, user_id: str, booking_id: UUID) -> None:
        self._require(user_id).remove_booking(booking_id=booking_id)

    def active_bookings(self, *, user_id: str) -> List[UUID]:
        return self._require(user_id).active_bookings()
