from refinder.documents.base import BaseTextExtractor


class PlainTextExtractor(BaseTextExtractor):
    """Decodes content as UTF-8, replacing undecodable bytes."""

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8", errors="replace").strip()
