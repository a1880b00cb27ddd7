from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class InboundMessage:
    """A raw request payload received from the channel."""

    id: int
    payload: dict[str, Any] = field(default_factory=dict)


class BaseMessageChannel(ABC):
    """Contract for all messaging channel adapters.

    Delivery is at-most-once: a received message is never handed out again,
    whether it is answered or failed.
    """

    @abstractmethod
    def receive(self) -> InboundMessage | None:
        """Take the next pending message, or None when there is none."""

    @abstractmethod
    def reply(self, message_id: int, payload: dict[str, Any] | None) -> None:
        """Complete a message, attaching the response payload if there is one."""

    @abstractmethod
    def fail(self, message_id: int, error: str) -> None:
        """Complete a message as failed with an error description."""
