from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from refinder.database.connection import get_connection
from refinder.database.models import MessageRecord
from refinder.messaging.base import BaseMessageChannel, InboundMessage


class PostgresMessageChannel(BaseMessageChannel):
    """Message queue on the refinder_messages table."""

    def receive(self) -> InboundMessage | None:
        """Claim the oldest pending message using SELECT FOR UPDATE SKIP LOCKED."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, payload
                    FROM refinder_messages
                    WHERE status = 'pending'
                    ORDER BY created_at, id
                    LIMIT 1
                    FOR UPDATE SKIP LOCKED
                    """
                )
                row = cur.fetchone()

            if row is None:
                conn.commit()
                return None

            conn.execute(
                """
                UPDATE refinder_messages
                SET status = 'processing', locked_at = NOW(), updated_at = NOW()
                WHERE id = %s
                """,
                (row["id"],),
            )
            conn.commit()

        payload = row["payload"] if isinstance(row["payload"], dict) else {}
        return InboundMessage(id=row["id"], payload=payload)

    def reply(self, message_id: int, payload: dict[str, Any] | None) -> None:
        response = Jsonb(payload) if payload is not None else None
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE refinder_messages
                SET status = 'done', response_payload = %s, updated_at = NOW()
                WHERE id = %s
                """,
                (response, message_id),
            )
            conn.commit()

    def fail(self, message_id: int, error: str) -> None:
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE refinder_messages
                SET status = 'failed', error_message = %s, updated_at = NOW()
                WHERE id = %s
                """,
                (error, message_id),
            )
            conn.commit()

    def post(self, payload: dict[str, Any]) -> int:
        """Enqueue a request payload and return its message id."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "INSERT INTO refinder_messages (payload) VALUES (%s) RETURNING id",
                    (Jsonb(payload),),
                )
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise RuntimeError("INSERT into refinder_messages returned no id")
        return int(row[0])

    def find_by_id(self, message_id: int) -> MessageRecord | None:
        """Find a message by ID, including its response payload."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, payload, status, response_payload, error_message,
                           locked_at, created_at, updated_at
                    FROM refinder_messages
                    WHERE id = %s
                    """,
                    (message_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return MessageRecord(
            id=row["id"],
            payload=row["payload"],
            status=row["status"],
            response_payload=row["response_payload"],
            error_message=row["error_message"],
            locked_at=row["locked_at"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
