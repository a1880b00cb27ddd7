from collections.abc import Iterable, Mapping
from typing import Any

import psycopg
from psycopg.types.json import Jsonb

from refinder.database.connection import get_connection
from refinder.storage.base import BaseKeyValueStore
from refinder.storage.exceptions import PersistenceError
from refinder.storage.keys import StorageKey


class PostgresKeyValueStore(BaseKeyValueStore):
    """Key-value operations on the refinder_storage table."""

    def read(self, keys: Iterable[StorageKey]) -> dict[StorageKey, Any]:
        names = [StorageKey(key).value for key in keys]
        if not names:
            return {}
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        "SELECT key, value FROM refinder_storage WHERE key = ANY(%s)",
                        (names,),
                    )
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise PersistenceError(f"Storage read failed: {exc}") from exc

        return {StorageKey(key): value for key, value in rows}

    def write(self, entries: Mapping[StorageKey, Any]) -> None:
        if not entries:
            return
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.executemany(
                        """
                        INSERT INTO refinder_storage (key, value, updated_at)
                        VALUES (%s, %s, NOW())
                        ON CONFLICT (key)
                        DO UPDATE SET value = EXCLUDED.value, updated_at = NOW()
                        """,
                        [
                            (StorageKey(key).value, Jsonb(value))
                            for key, value in entries.items()
                        ],
                    )
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(f"Storage write failed: {exc}") from exc
