from collections import deque
from itertools import count
from typing import Any

from refinder.messaging.base import BaseMessageChannel, InboundMessage


class InMemoryMessageChannel(BaseMessageChannel):
    """Process-local channel: a FIFO inbox plus recorded replies and failures."""

    def __init__(self) -> None:
        self._inbox: deque[InboundMessage] = deque()
        self._ids = count(1)
        self.replies: list[tuple[int, dict[str, Any] | None]] = []
        self.failures: list[tuple[int, str]] = []

    def post(self, payload: dict[str, Any]) -> int:
        """Enqueue a request payload and return its message id."""
        message = InboundMessage(id=next(self._ids), payload=payload)
        self._inbox.append(message)
        return message.id

    def receive(self) -> InboundMessage | None:
        if not self._inbox:
            return None
        return self._inbox.popleft()

    def reply(self, message_id: int, payload: dict[str, Any] | None) -> None:
        self.replies.append((message_id, payload))

    def fail(self, message_id: int, error: str) -> None:
        self.failures.append((message_id, error))
