from abc import ABC, abstractmethod
from collections.abc import Iterable


def visible_text(blocks: Iterable[str]) -> str:
    """Join text blocks into one line per visible line.

    Every line is stripped and blank lines are dropped, so HTML and PDF
    documents reach the extractor in the same shape.
    """
    lines = (line.strip() for block in blocks for line in block.splitlines())
    return "\n".join(line for line in lines if line)


class BaseTextExtractor(ABC):
    """Contract for adapters that turn raw document bytes into visible text."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract visible text from raw document content.

        Args:
            content: Raw bytes as fetched or read from disk.

        Returns:
            Visible text with surrounding whitespace stripped.

        Raises:
            DocumentLoadError: if the content cannot be converted.
        """
