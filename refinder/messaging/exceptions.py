class MessagingError(Exception):
    """Base exception for all messaging-related errors."""


class MessageFormatError(MessagingError):
    """Raised when a payload does not match any known message variant."""
