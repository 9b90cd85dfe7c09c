from doc_intake.extraction.base import BaseTextExtractor


class PlainTextAdapter(BaseTextExtractor):
    """Decodes UTF-8 text verbatim. A leading BOM is dropped, bad bytes replaced."""

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8-sig", errors="replace")
