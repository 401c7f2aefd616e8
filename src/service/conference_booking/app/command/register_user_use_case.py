from typing import List

import attrs

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import DuplicateError
from src.platform.logging.loguru_io import Logger
from src.service.conference_booking.app.interface.i_booking_state_store import (
    IBookingStateStore,
)
from src.service.conference_booking.domain.entity.user_entity import User


class RegisterUserUseCase:
    def __init__(self, *, state_store: IBookingStateStore, settings: Settings) -> None:
        self.state_store = state_store
        self.settings = settings

    @Logger.io
    def register(self, *, user_id: str, topics: List[str]) -> User:
        user = User.create(
            user_id=user_id, topics=topics, max_topics=self.settings.MAX_USER_TOPICS
        )

        with self.state_store.exclusive() as state:
            if state.users.exists(user_id=user_id):
                raise DuplicateError('User already exists', user_id=user_id)
            state.users.add(user=user)

        return attrs.evolve(user, booking_statuses={})
