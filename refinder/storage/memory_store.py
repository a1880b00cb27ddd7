import copy
from collections.abc import Iterable, Mapping
from typing import Any

from refinder.storage.base import BaseKeyValueStore
from refinder.storage.keys import StorageKey


class InMemoryKeyValueStore(BaseKeyValueStore):
    """Process-local store. Values are deep-copied in and out."""

    def __init__(self) -> None:
        self._items: dict[StorageKey, Any] = {}

    def read(self, keys: Iterable[StorageKey]) -> dict[StorageKey, Any]:
        return {
            key: copy.deepcopy(self._items[key]) for key in keys if key in self._items
        }

    def write(self, entries: Mapping[StorageKey, Any]) -> None:
        for key, value in entries.items():
            self._items[key] = copy.deepcopy(value)
