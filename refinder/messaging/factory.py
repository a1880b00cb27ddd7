from refinder.config.settings import Settings
from refinder.messaging.base import BaseMessageChannel
from refinder.messaging.memory_channel import InMemoryMessageChannel
from refinder.messaging.postgres_channel import PostgresMessageChannel


class MessageChannelFactory:
    """Creates the messaging channel configured in settings."""

    ADAPTERS: dict[str, type[BaseMessageChannel]] = {
        "postgres": PostgresMessageChannel,
        "memory": InMemoryMessageChannel,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseMessageChannel:
        backend = settings.channel_backend.lower()
        adapter_cls = cls.ADAPTERS.get(backend)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown channel backend '{backend}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
