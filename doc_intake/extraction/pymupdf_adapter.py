import pymupdf

from doc_intake.extraction.base import BaseTextExtractor
from doc_intake.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts linear page text from a PDF using PyMuPDF."""

    def extract(self, content: bytes) -> str:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise ExtractionError(f"Invalid PDF structure ({exc})") from exc
        return "\n".join(pages).strip()
