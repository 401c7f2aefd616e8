"""Conference availability DTO."""

import attrs


@attrs.define(frozen=True)
class ConferenceAvailability:
    conference_name: str
    total_slots: int
    available_slots: int
    confirmed_count: int
    waitlist_length: int
    has_started: bool
