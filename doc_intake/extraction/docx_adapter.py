import io

from docx import Document
from docx.table import Table

from doc_intake.extraction.base import BaseTextExtractor
from doc_intake.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts raw text from an OOXML word-processing document.

    Paragraphs and table cells are emitted in body order, so a table's text
    sits between the paragraphs around it. Formatting is discarded.
    """

    def extract(self, content: bytes) -> str:
        try:
            document = Document(io.BytesIO(content))
            parts: list[str] = []
            for block in document.iter_inner_content():
                if isinstance(block, Table):
                    for row in block.rows:
                        parts.extend(cell.text for cell in row.cells)
                else:
                    parts.append(block.text)
        except Exception as exc:
            raise ExtractionError(f"Could not read DOCX package ({exc})") from exc
        return "\n\n".join(parts)
