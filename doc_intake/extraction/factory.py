from doc_intake.config.settings import Settings
from doc_intake.extraction.base import BaseTextExtractor
from doc_intake.extraction.docx_adapter import DocxAdapter
from doc_intake.extraction.pdfplumber_adapter import PdfPlumberAdapter
from doc_intake.extraction.plain_text_adapter import PlainTextAdapter
from doc_intake.extraction.pymupdf_adapter import PyMuPdfAdapter
from doc_intake.extraction.router import TextExtractor
from doc_intake.extraction.xlsx_adapter import XlsxAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


class TextExtractorFactory:
    """Wires every format adapter into a TextExtractor."""

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        plain_text = PlainTextAdapter()
        return TextExtractor(
            adapters={
                ".pdf": PdfExtractorFactory.create(settings),
                ".docx": DocxAdapter(),
                ".xlsx": XlsxAdapter(),
                ".txt": plain_text,
                ".csv": plain_text,
                ".json": plain_text,
            }
        )
