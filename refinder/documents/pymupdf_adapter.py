import pymupdf

from refinder.documents.base import BaseTextExtractor, visible_text
from refinder.documents.exceptions import PdfExtractionError
from refinder.logging.logger import Log


class PyMuPdfAdapter(BaseTextExtractor):
    """Visible PDF text through PyMuPDF, in reading order.

    Encrypted documents are refused instead of yielding empty pages.
    """

    def extract(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise PdfExtractionError("PDF is password protected")
                page_texts = [page.get_text("text", sort=True) for page in doc]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"PyMuPDF could not read the PDF: {exc}") from exc
        Log.debug(f"PyMuPDF read {len(page_texts)} pages")
        return visible_text(page_texts)
