import io

import pdfplumber

from doc_intake.extraction.base import BaseTextExtractor
from doc_intake.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts linear page text from a PDF using pdfplumber."""

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"Invalid PDF structure ({exc})") from exc
        return "\n".join(pages).strip()
