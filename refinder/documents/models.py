from dataclasses import dataclass
from enum import Enum


class ContentKind(str, Enum):
    HTML = "html"
    PDF = "pdf"
    TEXT = "text"


@dataclass(frozen=True)
class Document:
    """A document's identity and its visible text."""

    url: str
    text: str
