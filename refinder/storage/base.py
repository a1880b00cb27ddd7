from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from refinder.storage.keys import StorageKey


class BaseKeyValueStore(ABC):
    """Contract for all key-value persistence adapters."""

    @abstractmethod
    def read(self, keys: Iterable[StorageKey]) -> dict[StorageKey, Any]:
        """Read the given keys.

        Returns:
            Mapping of the keys that exist; missing keys are left out.

        Raises:
            PersistenceError: if the store cannot be read.
        """

    @abstractmethod
    def write(self, entries: Mapping[StorageKey, Any]) -> None:
        """Insert or overwrite the given entries. Values must be JSON-serializable.

        Raises:
            PersistenceError: if the store cannot be written.
        """
