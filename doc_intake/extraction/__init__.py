from doc_intake.extraction.base import BaseTextExtractor
from doc_intake.extraction.factory import PdfExtractorFactory, TextExtractorFactory
from doc_intake.extraction.models import ExtractionResult
from doc_intake.extraction.router import OCR_EXTENSIONS, TextExtractor

__all__ = [
    "OCR_EXTENSIONS",
    "BaseTextExtractor",
    "ExtractionResult",
    "PdfExtractorFactory",
    "TextExtractor",
    "TextExtractorFactory",
]
