from datetime import datetime
from typing import Dict, List

from src.platform.exception.exceptions import NotFoundError
from src.service.conference_booking.app.interface.i_conference_repo import IConferenceRepo
from src.service.conference_booking.domain.entity.conference_entity import Conference


class InMemoryConferenceRepo(IConferenceRepo):
    def __init__(self) -> None:
        self._conferences: Dict[str, Conference] = {}

    def _require(self, name: str) -> Conference:
        conference = self._conferences.get(name)
        if conference is None:
            raise NotFoundError('Conference not found', conference_name=name)
        return conference

    def add(self, *, conference: Conference) -> None:
        self._conferences[conference.name] = conference

    def get(self, *, name: str) -> Conference | None:
        return self._conferences.get(name)

    def exists(self, *, name: str) -> bool:
        return name in self._conferences

    def list_all(self) -> List[Conference]:
        return list(self._conferences.values())

    def try_acquire_slot(self, *, name: str) -> bool:
        return self._require(name).try_acquire_slot()

    def release_slot(self, *, name: str) -> None:
        self._require(name).release_slot()

    def has_slot_available(self, *, name: str) -> bool:
        return self._require(name).has_slot_available()

    def has_started(self, *, name: str, now: datetime) -> bool:
        return self._require(name).has_started(now=now)

    def overlaps(self, *, name: str, start_time: datetime, end_time: datetime) -> bool:
        return self._require(name).overlaps(start_time=start_time, end_time=end_time)
