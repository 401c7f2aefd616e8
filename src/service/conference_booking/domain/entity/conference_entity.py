from datetime import datetime, timedelta
from typing import List

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger


DEFAULT_MAX_TOPICS = 10
DEFAULT_MAX_DURATION = timedelta(hours=12)


@attrs.define
class Conference:
    name: str
    location: str
    topics: List[str]
    start_time: datetime
    end_time: datetime
    total_slots: int
    available_slots: int

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        name: str,
        location: str,
        topics: List[str],
        start_time: datetime,
        end_time: datetime,
        total_slots: int,
        max_topics: int = DEFAULT_MAX_TOPICS,
        max_duration: timedelta = DEFAULT_MAX_DURATION,
    ) -> 'Conference':
        if not name or not name.strip():
            raise ValidationError('Conference name cannot be empty')
        if len(topics) > max_topics:
            raise ValidationError(
                f'Maximum {max_topics} topics allowed', conference_name=name, topics=len(topics)
            )
        if total_slots <= 0:
            raise ValidationError(
                'Slots must be greater than 0', conference_name=name, total_slots=total_slots
            )
        if start_time.tzinfo is None or end_time.tzinfo is None:
            raise ValidationError(
                'Conference start and end times must be timezone-aware', conference_name=name
            )
        if end_time - start_time > max_duration:
            raise ValidationError(
                f'Conference duration cannot exceed {max_duration}', conference_name=name
            )
        if start_time >= end_time:
            raise ValidationError('Start time must be before end time', conference_name=name)

        return cls(
            name=name,
            location=location,
            topics=list(topics),
            start_time=start_time,
            end_time=end_time,
            total_slots=total_slots,
            available_slots=total_slots,
        )

    def try_acquire_slot(self) -> bool:
        if self.available_slots > 0:
            self.available_slots -= 1
            return True
        return False

    def release_slot(self) -> None:
        if self.available_slots < self.total_slots:
            self.available_slots += 1

    def has_slot_available(self) -> bool:
        return self.available_slots > 0

    def has_started(self, *, now: datetime) -> bool:
        return now >= self.start_time

    def overlaps(self, *, start_time: datetime, end_time: datetime) -> bool:
        """Half-open interval test: [start, end) against [self.start, self.end)."""
        return not (end_time <= self.start_time or start_time >= self.end_time)

    def overlaps_conference(self, other: 'Conference') -> bool:
        return self.overlaps(start_time=other.start_time, end_time=other.end_time)
