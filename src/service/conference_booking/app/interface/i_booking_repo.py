from abc import ABC, abstractmethod
from typing import List

from uuid_utils import UUID

from src.service.conference_booking.domain.entity.booking_entity import Booking
from src.service.conference_booking.domain.enum.booking_status import BookingStatus


class IBookingRepo(ABC):
    """
    Repository interface for booking records.

    Responsibilities:
    - Store every booking ever created (canceled ones included)
    - Replace a booking with its evolved version after a transition
    """

    @abstractmethod
    def save(self, *, booking: Booking) -> Booking:
        """
        Insert or replace a booking by id.

        Args:
            booking: Booking entity (new or evolved)

        Returns:
            The stored booking
        """
        pass

    @abstractmethod
    def get_by_id(self, *, booking_id: UUID) -> Booking | None:
        pass

    @abstractmethod
    def list_by_user(self, *, user_id: str) -> List[Booking]:
        pass

    @abstractmethod
    def list_by_conference(
        self, *, conference_name: str, status: BookingStatus | None = None
    ) -> List[Booking]:
        pass
