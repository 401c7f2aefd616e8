from abc import ABC, abstractmethod

from uuid_utils import UUID


class IBookingIdGenerator(ABC):
    @abstractmethod
    def generate(self, *, user_id: str, conference_name: str) -> UUID:
        """
        Produce a booking id unique across the system's lifetime.

        Args:
            user_id: Owner of the booking being created
            conference_name: Conference being booked

        Returns:
            A never-before-issued booking id
        """
        pass
