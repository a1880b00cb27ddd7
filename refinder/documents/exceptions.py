class DocumentLoadError(Exception):
    """Raised when a document cannot be fetched, read or turned into text."""


class PdfExtractionError(DocumentLoadError):
    """Raised when a PDF adapter fails to extract text."""
