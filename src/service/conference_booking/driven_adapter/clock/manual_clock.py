from datetime import datetime, timedelta

from src.service.conference_booking.app.interface.i_clock import IClock


class ManualClock(IClock):
    """Clock that only moves when told to. Used for replays and tests."""

    def __init__(self, *, start: datetime) -> None:
        if start.tzinfo is None:
            raise ValueError('ManualClock requires a timezone-aware start')
        self._current = start

    def now(self) -> datetime:
        return self._current

    def advance(self, **delta: float) -> datetime:
        step = timedelta(**delta)
        if step < timedelta(0):
            raise ValueError('ManualClock cannot move backwards')
        self._current += step
        return self._current
