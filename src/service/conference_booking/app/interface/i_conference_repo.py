"""
Conference Repository Interface

Registry of conferences keyed by name, including slot accounting.
Slot mutations must only be called inside the state store's exclusive section.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from src.service.conference_booking.domain.entity.conference_entity import Conference


class IConferenceRepo(ABC):
    @abstractmethod
    def add(self, *, conference: Conference) -> None:
        pass

    @abstractmethod
    def get(self, *, name: str) -> Conference | None:
        pass

    @abstractmethod
    def exists(self, *, name: str) -> bool:
        pass

    @abstractmethod
    def list_all(self) -> List[Conference]:
        pass

    @abstractmethod
    def try_acquire_slot(self, *, name: str) -> bool:
        """
        Take one seat if any remain.

        Returns:
            True if a seat was taken, False (state unchanged) if the conference is full
        """
        pass

    @abstractmethod
    def release_slot(self, *, name: str) -> None:
        """Give one seat back, never exceeding total slots."""
        pass

    @abstractmethod
    def has_slot_available(self, *, name: str) -> bool:
        pass

    @abstractmethod
    def has_started(self, *, name: str, now: datetime) -> bool:
        pass

    @abstractmethod
    def overlaps(self, *, name: str, start_time: datetime, end_time: datetime) -> bool:
        pass
