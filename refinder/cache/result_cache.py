"""Single-slot memo of the latest extraction result, keyed by document url.

A read for any other document, or of an empty result, clears the slot and
its persisted copy before reporting a miss. The truncated flag is persisted
alongside the terms; a stored result without it loads as not truncated.
"""

from dataclasses import dataclass, field
from typing import Any

from refinder.extraction.models import MatchResult
from refinder.logging.logger import Log
from refinder.storage.base import BaseKeyValueStore
from refinder.storage.exceptions import PersistenceError
from refinder.storage.keys import StorageKey


@dataclass(frozen=True)
class CacheEntry:
    document_id: str = ""
    result: MatchResult = field(default_factory=MatchResult)


class ResultCache:
    """Holds at most one CacheEntry, mirrored to the key-value store."""

    def __init__(self, store: BaseKeyValueStore) -> None:
        self._store = store
        self._entry: CacheEntry | None = None
        self._loaded = False

    def put(self, document_id: str, result: MatchResult) -> None:
        """Replace the stored entry."""
        self._entry = CacheEntry(document_id=document_id, result=result)
        self._loaded = True
        self._persist(self._entry)
        Log.debug("Cached results", url=document_id, terms=result.count)

    def get(self, document_id: str) -> MatchResult | None:
        """Return the stored result for *document_id*, clearing the slot on a miss."""
        entry = self._current_entry()
        if entry.document_id != document_id or not entry.result.terms:
            self._clear()
            return None
        return entry.result

    def _current_entry(self) -> CacheEntry:
        if not self._loaded:
            self._entry = self._load()
            self._loaded = True
        return self._entry if self._entry is not None else CacheEntry()

    def _clear(self) -> None:
        self._entry = CacheEntry()
        self._persist(self._entry)

    def _load(self) -> CacheEntry | None:
        try:
            data = self._store.read(
                [StorageKey.URL, StorageKey.SEARCH_RESULTS, StorageKey.SEARCH_RESULTS_TRUNCATED]
            )
        except PersistenceError as exc:
            Log.warning(f"Could not read cached results, treating as absent: {exc}")
            return None
        return self._entry_from_storage(data)

    def _entry_from_storage(self, data: dict[StorageKey, Any]) -> CacheEntry | None:
        url = data.get(StorageKey.URL)
        terms = data.get(StorageKey.SEARCH_RESULTS)
        if not isinstance(url, str) or not isinstance(terms, list):
            return None
        if not all(isinstance(term, str) for term in terms):
            Log.warning("Ignoring malformed cached results", url=url)
            return None
        result = MatchResult(
            terms=tuple(terms),
            truncated=data.get(StorageKey.SEARCH_RESULTS_TRUNCATED) is True,
        )
        return CacheEntry(document_id=url, result=result)

    def _persist(self, entry: CacheEntry) -> None:
        try:
            self._store.write(
                {
                    StorageKey.URL: entry.document_id,
                    StorageKey.SEARCH_RESULTS: list(entry.result.terms),
                    StorageKey.SEARCH_RESULTS_TRUNCATED: entry.result.truncated,
                }
            )
        except PersistenceError as exc:
            Log.warning(f"Could not persist cached results: {exc}")
