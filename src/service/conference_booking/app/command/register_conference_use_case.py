from datetime import datetime, timedelta
from typing import List

import attrs

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import DuplicateError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.domain.entity.conference_entity import Conference


class RegisterConferenceUseCase:
    def __init__(self, *, state_store: IBookingStateStore, settings: Settings) -> None:
        self.state_store = state_store
        self.settings = settings

    @Logger.io
    def register(
        self,
        *,
        name: str,
        location: str,
        topics: List[str],
        start_time: datetime,
        end_time: datetime,
        total_slots: int,
    ) -> Conference:
        """
        Register a conference with all of its slots available.

        Raises:
            ValidationError: Too many topics, non-positive slots, bad or too long window
            DuplicateError: A conference with this name already exists
        """
        conference = Conference.create(
            name=name,
            location=location,
            topics=topics,
            start_time=start_time,
            end_time=end_time,
            total_slots=total_slots,
            max_topics=self.settings.MAX_CONFERENCE_TOPICS,
            max_duration=timedelta(hours=self.settings.MAX_CONFERENCE_DURATION_HOURS),
        )

        with self.state_store.exclusive() as state:
            if state.conferences.exists(name=name):
                raise DuplicateError(
                    'Conference with this name already exists', conference_name=name
                )
            state.conferences.add(conference=conference)

        Logger.base.info(f'🗓️ [CONFERENCE] Registered {name} with {total_slots} slots')
        return attrs.evolve(conference)
