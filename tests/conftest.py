import io
from collections.abc import Callable

import pytest
from docx import Document
from openpyxl import Workbook
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Capstone abstract and conclusion")
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
def make_docx() -> Callable[..., bytes]:
    """Build a DOCX: paragraphs, an optional table, then optional trailing paragraphs."""

    def _make(
        paragraphs: list[str],
        table: list[list[str]] | None = None,
        after_table: list[str] | None = None,
    ) -> bytes:
        document = Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table:
            grid = document.add_table(rows=len(table), cols=len(table[0]))
            for row_idx, row in enumerate(table):
                for col_idx, value in enumerate(row):
                    grid.cell(row_idx, col_idx).text = value
        for text in after_table or []:
            document.add_paragraph(text)
        buf = io.BytesIO()
        document.save(buf)
        return buf.getvalue()

    return _make


@pytest.fixture()
def make_xlsx() -> Callable[[dict[str, list[list[object]]]], bytes]:
    """Build an XLSX with one sheet per mapping entry, in insertion order."""

    def _make(sheets: dict[str, list[list[object]]]) -> bytes:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            sheet = workbook.create_sheet(title)
            for row in rows:
                sheet.append(row)
        buf = io.BytesIO()
        workbook.save(buf)
        return buf.getvalue()

    return _make
