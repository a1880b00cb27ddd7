from refinder.config.settings import Settings
from refinder.storage.base import BaseKeyValueStore
from refinder.storage.memory_store import InMemoryKeyValueStore
from refinder.storage.postgres_store import PostgresKeyValueStore


class KeyValueStoreFactory:
    """Creates the key-value store configured in settings."""

    ADAPTERS: dict[str, type[BaseKeyValueStore]] = {
        "postgres": PostgresKeyValueStore,
        "memory": InMemoryKeyValueStore,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseKeyValueStore:
        backend = settings.store_backend.lower()
        adapter_cls = cls.ADAPTERS.get(backend)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown store backend '{backend}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
