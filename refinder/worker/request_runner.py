from refinder.logging.logger import Log
from refinder.messaging.base import BaseMessageChannel, InboundMessage
from refinder.messaging.models import parse_request
from refinder.service.refinder_service import ReFinderService


class RequestRunner:
    """Run one request, reply with its response, or mark it failed. Never retries."""

    def __init__(self, service: ReFinderService, channel: BaseMessageChannel) -> None:
        self._service = service
        self._channel = channel

    def run(self, message: InboundMessage) -> None:
        """Handle a single inbound message with error handling."""
        try:
            request = parse_request(message.payload)
            Log.info(f"Running message {message.id} ({request.message})")
            response = self._service.handle(request)
            self._channel.reply(message.id, response.to_payload())
            Log.info(f"Message {message.id} answered with {response.message}")
        except Exception as exc:
            self._handle_failure(message, exc)

    def _handle_failure(self, message: InboundMessage, exc: Exception) -> None:
        Log.error(f"Message {message.id} failed: {exc}")
        try:
            self._channel.fail(message.id, str(exc))
        except Exception as fail_exc:
            Log.error(f"Could not mark message {message.id} as failed: {fail_exc}")
