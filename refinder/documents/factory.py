from refinder.config.settings import Settings
from refinder.documents.base import BaseTextExtractor
from refinder.documents.html_adapter import HtmlTextExtractor
from refinder.documents.models import ContentKind
from refinder.documents.pdfplumber_adapter import PdfPlumberAdapter
from refinder.documents.pymupdf_adapter import PyMuPdfAdapter
from refinder.documents.text_adapter import PlainTextExtractor


class TextExtractorFactory:
    """Creates one text extractor per content kind; the PDF engine is configurable."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create_pdf(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create_all(cls, settings: Settings) -> dict[ContentKind, BaseTextExtractor]:
        return {
            ContentKind.HTML: HtmlTextExtractor(),
            ContentKind.PDF: cls.create_pdf(settings),
            ContentKind.TEXT: PlainTextExtractor(),
        }
