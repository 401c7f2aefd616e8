from collections import defaultdict, deque
from typing import Deque, Dict, List

from uuid_utils import UUID

from src.service.conference_booking.app.interface.i_waitlist_repo import IWaitlistRepo


class InMemoryWaitlistRepo(IWaitlistRepo):
    def __init__(self) -> None:
        self._queues: Dict[str, Deque[UUID]] = defaultdict(deque)

    def enqueue(self, *, conference_name: str, booking_id: UUID) -> int:
        queue = self._queues[conference_name]
        queue.append(booking_id)
        return len(queue)

    def remove(self, *, conference_name: str, booking_id: UUID) -> bool:
        queue = self._queues[conference_name]
        try:
            queue.remove(booking_id)
        except ValueError:
            return False
        return True

    def peek(self, *, conference_name: str) -> UUID | None:
        queue = self._queues[conference_name]
        return queue[0] if queue else None

    def requeue_to_back(self, *, conference_name: str, booking_id: UUID) -> int | None:
        if not self.remove(conference_name=conference_name, booking_id=booking_id):
            return None
        return self.enqueue(conference_name=conference_name, booking_id=booking_id)

    def list_ids(self, *, conference_name: str) -> List[UUID]:
        return list(self._queues[conference_name])

    def size(self, *, conference_name: str) -> int:
        return len(self._queues[conference_name])
