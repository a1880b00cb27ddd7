from refinder.config.settings import Settings
from refinder.database.connection import close_pool, init_pool
from refinder.database.schema import ensure_schema
from refinder.logging.logger import Log
from refinder.messaging.factory import MessageChannelFactory
from refinder.service.refinder_service import build_service
from refinder.worker.request_runner import RequestRunner
from refinder.worker.worker import Worker


def uses_database(settings: Settings) -> bool:
    return "postgres" in (settings.store_backend.lower(), settings.channel_backend.lower())


def main() -> None:
    """Entry point: initialize pool -> build dependencies -> start worker loop."""
    settings = Settings()
    Log.configure(settings.log_level)
    if uses_database(settings):
        init_pool(settings)
        ensure_schema()

    service = None
    try:
        service = build_service(settings)
        channel = MessageChannelFactory.create(settings)
        runner = RequestRunner(service, channel)
        worker = Worker(channel, runner, settings)
        worker.run()
    finally:
        if service is not None:
            service.close()
        close_pool()


if __name__ == "__main__":
    main()
