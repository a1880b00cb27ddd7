from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class MessageRecord:
    """Represents a row from the refinder_messages table."""

    id: int
    payload: dict[str, Any] = field(default_factory=dict)
    status: str = "pending"
    response_payload: dict[str, Any] | None = None
    error_message: str | None = None
    locked_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
