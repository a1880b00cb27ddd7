import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _render_pdf(pages: list[list[str]]) -> bytes:
    """Render a PDF with one page per entry, one drawn line per string."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        for offset, line in enumerate(lines):
            c.drawString(72, 720 - 18 * offset, line)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    return _render_pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return _render_pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A valid PDF with a single blank page."""
    return _render_pdf([[]])


@pytest.fixture()
def lined_pdf_bytes() -> bytes:
    """Two pages of short lines, the first page with a blank gap."""
    return _render_pdf([["First line", "", "Second line"], ["Third line"]])
