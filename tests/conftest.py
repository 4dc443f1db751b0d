import io
from collections.abc import Callable

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docanalyst.analysis.models import Analysis
from docanalyst.documents.models import Document, count_words, utc_now


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with a styled heading and two paragraphs."""
    document = docx.Document()
    document.add_heading("Quarterly Report", level=1)
    document.add_paragraph("Revenue grew by twelve percent.")
    paragraph = document.add_paragraph("Marker ")
    paragraph.add_run("DOCX-MARKER").bold = True
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_xlsx_bytes() -> bytes:
    """Generate a two-sheet workbook; only the first sheet should be read."""
    workbook = openpyxl.Workbook()
    first = workbook.active
    first.title = "Budget"
    first.append(["item", "amount"])
    first.append(["XLSX-MARKER", 42])
    first.append(["empty", None])
    second = workbook.create_sheet("Hidden")
    second.append(["SECOND-SHEET-ONLY"])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def make_document() -> Callable[..., Document]:
    counter = {"n": 0}

    def _make(
        filename: str = "report.txt",
        content: str = "some content",
        size_bytes: int = 100,
        document_id: str | None = None,
        stored_name: str | None = None,
    ) -> Document:
        counter["n"] += 1
        n = counter["n"]
        return Document(
            id=document_id or f"doc-{n}",
            stored_name=stored_name or f"stored-{n}-{filename}",
            filename=filename,
            size_bytes=size_bytes,
            type_tag=filename.rsplit(".", 1)[-1].upper(),
            uploaded_at=utc_now(),
            content=content,
            word_count=count_words(content),
            analysis=Analysis(summary=f"summary {n}"),
        )

    return _make
