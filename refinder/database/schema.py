"""Tables owned by the service: the key-value store and the message queue."""

from refinder.database.connection import get_connection

STORAGE_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS refinder_storage (
    key TEXT PRIMARY KEY,
    value JSONB NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
)
"""

MESSAGES_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS refinder_messages (
    id BIGSERIAL PRIMARY KEY,
    payload JSONB NOT NULL,
    status TEXT NOT NULL DEFAULT 'pending',
    response_payload JSONB,
    error_message TEXT,
    locked_at TIMESTAMPTZ,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
)
"""


def ensure_schema() -> None:
    """Create the service tables if they do not exist yet."""
    with get_connection() as conn:
        conn.execute(STORAGE_TABLE_DDL)
        conn.execute(MESSAGES_TABLE_DDL)
        conn.commit()
