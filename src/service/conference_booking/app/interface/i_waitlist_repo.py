"""
Waitlist Repository Interface

Per-conference FIFO queue of waitlisted booking ids.
"""

from abc import ABC, abstractmethod
from typing import List

from uuid_utils import UUID


class IWaitlistRepo(ABC):
    @abstractmethod
    def enqueue(self, *, conference_name: str, booking_id: UUID) -> int:
        """
        Append a booking id to the back of the conference's waitlist.

        Returns:
            1-based position of the id after the append
        """
        pass

    @abstractmethod
    def remove(self, *, conference_name: str, booking_id: UUID) -> bool:
        """
        Remove an id from anywhere in the queue, keeping the others' relative order.

        Returns:
            True if the id was present
        """
        pass

    @abstractmethod
    def peek(self, *, conference_name: str) -> UUID | None:
        pass

    @abstractmethod
    def requeue_to_back(self, *, conference_name: str, booking_id: UUID) -> int | None:
        """
        Move an id from its current position to the back.

        Returns:
            New 1-based position, or None if the id was not queued
        """
        pass

    @abstractmethod
    def list_ids(self, *, conference_name: str) -> List[UUID]:
        pass

    @abstractmethod
    def size(self, *, conference_name: str) -> int:
        pass
