from enum import StrEnum


class CancelReason(StrEnum):
    USER_REQUEST = 'user_request'
    OVERLAPPING_CONFIRMATION = 'overlapping_confirmation'
    CONFERENCE_STARTED = 'conference_started'
