from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Conference Booking System'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # DEBUG-level logs + rotating log file

    # Waitlist promotion
    WAITLIST_CONFIRMATION_WINDOW_SECONDS: int = 3600  # Grace window once a slot is offered

    # Entity limits
    MAX_CONFERENCE_TOPICS: int = 10
    MAX_USER_TOPICS: int = 50
    MAX_CONFERENCE_DURATION_HOURS: int = 12

    @field_validator(
        'WAITLIST_CONFIRMATION_WINDOW_SECONDS',
        'MAX_CONFERENCE_TOPICS',
        'MAX_USER_TOPICS',
        'MAX_CONFERENCE_DURATION_HOURS',
    )
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('must be greater than 0')
        return v


settings = Settings()  # type: ignore
