class ServiceError(Exception):
    """Base exception for request handling errors."""


class NoActiveDocumentError(ServiceError):
    """Raised when a request needs a document but none has been activated."""
