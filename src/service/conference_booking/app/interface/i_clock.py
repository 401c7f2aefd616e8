from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Wall-clock source. Must return timezone-aware, non-decreasing instants."""

    @abstractmethod
    def now(self) -> datetime:
        pass
