from pydantic import ValidationError

from refinder.logging.logger import Log
from refinder.messaging.models import SearchForTermsData
from refinder.storage.base import BaseKeyValueStore
from refinder.storage.exceptions import PersistenceError
from refinder.storage.keys import StorageKey


class PatternStore:
    """Remembers the last pattern object the user entered."""

    def __init__(self, store: BaseKeyValueStore) -> None:
        self._store = store

    def save(self, pattern: SearchForTermsData) -> None:
        try:
            self._store.write({StorageKey.PATTERN_OBJECT: pattern.to_payload()})
        except PersistenceError as exc:
            Log.warning(f"Could not persist pattern object: {exc}")

    def load(self) -> SearchForTermsData | None:
        """Return the saved pattern, or None if there is no usable one."""
        try:
            data = self._store.read([StorageKey.PATTERN_OBJECT])
        except PersistenceError as exc:
            Log.warning(f"Could not read pattern object, treating as absent: {exc}")
            return None

        raw = data.get(StorageKey.PATTERN_OBJECT)
        if raw is None:
            return None
        try:
            pattern = SearchForTermsData.model_validate(raw)
        except ValidationError:
            Log.warning("Ignoring malformed stored pattern object")
            return None
        if not pattern.search_pattern:
            return None
        return pattern
