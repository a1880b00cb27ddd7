import time

from refinder.config.settings import Settings
from refinder.logging.logger import Log
from refinder.messaging.base import BaseMessageChannel, InboundMessage
from refinder.worker.request_runner import RequestRunner


class Worker:
    """Poll loop: receive -> dispatch, sleeping while the channel is empty."""

    def __init__(
        self,
        channel: BaseMessageChannel,
        runner: RequestRunner,
        settings: Settings,
    ) -> None:
        self._channel = channel
        self._runner = runner
        self._settings = settings

    def run(self, max_messages: int | None = None) -> None:
        """Main poll loop. Runs forever until interrupted.

        If max_messages is set, stop after handling that many messages.
        """
        Log.info("Worker started, polling for messages")
        handled = 0
        try:
            while max_messages is None or handled < max_messages:
                message = self._try_receive()
                if message is None:
                    Log.debug("No messages available, sleeping")
                    time.sleep(self._settings.poll_interval_seconds)
                    continue
                self._runner.run(message)
                handled += 1
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")

    def _try_receive(self) -> InboundMessage | None:
        """Take the next message. Channel errors are logged and treated as idle."""
        try:
            return self._channel.receive()
        except Exception as exc:
            Log.warning(f"Channel error, will retry: {exc}")
            return None
