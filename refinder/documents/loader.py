from pathlib import Path
from typing import ClassVar
from urllib.parse import urlsplit
from urllib.request import url2pathname

import httpx

from refinder.config.settings import Settings
from refinder.documents.base import BaseTextExtractor
from refinder.documents.exceptions import DocumentLoadError
from refinder.documents.factory import TextExtractorFactory
from refinder.documents.models import ContentKind, Document
from refinder.logging.logger import Log


class DocumentLoader:
    """Resolves a document url, reads its bytes and extracts its visible text.

    Supports http(s) urls (fetched with httpx). file:// urls and bare
    filesystem paths are read only from beneath *local_root*; without one,
    local documents are refused.
    """

    HTML_SUFFIXES: ClassVar[frozenset[str]] = frozenset({".html", ".htm", ".xhtml"})
    HTML_CONTENT_TYPES: ClassVar[frozenset[str]] = frozenset(
        {"text/html", "application/xhtml+xml"}
    )

    def __init__(
        self,
        extractors: dict[ContentKind, BaseTextExtractor],
        client: httpx.Client,
        local_root: Path | None = None,
    ) -> None:
        self._extractors = extractors
        self._client = client
        self._local_root = local_root.resolve() if local_root is not None else None

    def load(self, url: str) -> Document:
        """Load the document at *url*.

        Raises:
            DocumentLoadError: if the document cannot be read or converted.
        """
        content, content_type = self._read(url)
        kind = self._classify(url, content_type, content)
        text = self._extractors[kind].extract(content)
        Log.info(
            f"Loaded document: {len(content)} bytes, {len(text)} chars",
            url=url,
            kind=kind.value,
        )
        return Document(url=url, text=text)

    def close(self) -> None:
        self._client.close()

    def _read(self, url: str) -> tuple[bytes, str | None]:
        scheme = urlsplit(url).scheme.lower()
        if scheme in ("http", "https"):
            return self._fetch(url)
        if scheme == "file":
            return self._read_file(Path(url2pathname(urlsplit(url).path))), None
        # A one-letter scheme is a Windows drive letter.
        if scheme == "" or len(scheme) == 1:
            return self._read_file(Path(url)), None
        raise DocumentLoadError(f"Unsupported url scheme '{scheme}': {url}")

    def _fetch(self, url: str) -> tuple[bytes, str | None]:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DocumentLoadError(f"Fetching {url} failed: {exc}") from exc
        return response.content, response.headers.get("content-type")

    def _read_file(self, path: Path) -> bytes:
        if self._local_root is None:
            raise DocumentLoadError(f"Local documents are disabled: {path}")
        resolved = path.resolve()
        if not resolved.is_relative_to(self._local_root):
            raise DocumentLoadError(f"{path} is outside the document root {self._local_root}")
        try:
            return resolved.read_bytes()
        except OSError as exc:
            raise DocumentLoadError(f"Reading {path} failed: {exc}") from exc

    def _classify(self, url: str, content_type: str | None, content: bytes) -> ContentKind:
        if content_type:
            media_type = content_type.split(";", 1)[0].strip().lower()
            if media_type == "application/pdf":
                return ContentKind.PDF
            if media_type in self.HTML_CONTENT_TYPES:
                return ContentKind.HTML
            if media_type.startswith("text/"):
                return ContentKind.TEXT

        suffix = Path(urlsplit(url).path).suffix.lower()
        if suffix == ".pdf" or content.startswith(b"%PDF-"):
            return ContentKind.PDF
        if suffix in self.HTML_SUFFIXES:
            return ContentKind.HTML
        return ContentKind.TEXT


def build_document_loader(settings: Settings) -> DocumentLoader:
    """Build a DocumentLoader with the configured PDF engine and HTTP client."""
    client = httpx.Client(
        timeout=settings.document_timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": settings.document_user_agent},
    )
    return DocumentLoader(
        extractors=TextExtractorFactory.create_all(settings),
        client=client,
        local_root=settings.document_local_root,
    )
