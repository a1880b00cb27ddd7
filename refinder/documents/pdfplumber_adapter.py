import io

import pdfplumber

from refinder.documents.base import BaseTextExtractor, visible_text
from refinder.documents.exceptions import PdfExtractionError
from refinder.logging.logger import Log


class PdfPlumberAdapter(BaseTextExtractor):
    """Visible PDF text through pdfplumber, one line per rendered text line."""

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                page_texts = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not read the PDF: {exc}") from exc
        Log.debug(f"pdfplumber read {len(page_texts)} pages")
        return visible_text(page_texts)
