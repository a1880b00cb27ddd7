from typing import ClassVar

from bs4 import BeautifulSoup

from refinder.documents.base import BaseTextExtractor, visible_text
from refinder.documents.exceptions import DocumentLoadError


class HtmlTextExtractor(BaseTextExtractor):
    """Extracts the rendered-visible text of an HTML page using BeautifulSoup."""

    HIDDEN_TAGS: ClassVar[tuple[str, ...]] = ("head", "script", "style", "noscript", "template")

    def extract(self, content: bytes) -> str:
        try:
            soup = BeautifulSoup(content, "html.parser")
        except Exception as exc:
            raise DocumentLoadError(f"HTML parsing failed: {exc}") from exc
        for tag in soup(list(self.HIDDEN_TAGS)):
            tag.decompose()
        body = soup.body if soup.body is not None else soup
        return visible_text(body.stripped_strings)
