from abc import ABC, abstractmethod
from typing import List

from uuid_utils import UUID

from src.service.conference_booking.domain.entity.user_entity import User
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class IUserRepo(ABC):
    """Registry of users and each user's booking-id → status map."""

    @abstractmethod
    def add(self, *, user: User) -> None:
        pass

    @abstractmethod
    def get(self, *, user_id: str) -> User | None:
        pass

    @abstractmethod
    def exists(self, *, user_id: str) -> bool:
        pass

    @abstractmethod
    def record_booking(self, *, user_id: str, booking_id: UUID, status: BookingStatus) -> None:
        pass

    @abstractmethod
    def update_status(self, *, user_id: str, booking_id: UUID, status: BookingStatus) -> None:
        """No-op if the booking id is unknown to that user."""
        pass

    @abstractmethod
    def remove_booking(self, *, user_id: str, booking_id: UUID) -> None:
        pass

    @abstractmethod
    def active_bookings(self, *, user_id: str) -> List[UUID]:
        """Booking ids whose recorded status is not CANCELED."""
        pass
