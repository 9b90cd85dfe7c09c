from collections.abc import Mapping

from doc_intake.extraction.base import BaseTextExtractor
from doc_intake.extraction.exceptions import ExtractionError
from doc_intake.extraction.models import ExtractionResult
from doc_intake.logging.logger import Log

OCR_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".webp"})


class TextExtractor:
    """Routes a file to the adapter registered for its extension.

    Image extensions are never extracted here; they yield an OCR handoff.
    Extensions with no adapter contribute no text and raise no error.
    """

    def __init__(self, adapters: Mapping[str, BaseTextExtractor]) -> None:
        self._adapters = dict(adapters)

    def extract(self, file_name: str, extension: str, content: bytes) -> ExtractionResult:
        if extension in OCR_EXTENSIONS:
            Log.info(f"Deferring {file_name} to external OCR", extension=extension)
            return ExtractionResult.ocr_required()

        adapter = self._adapters.get(extension)
        if adapter is None:
            Log.debug(f"No extractor for {file_name}, contributing empty text", extension=extension)
            return ExtractionResult.of_text("")

        try:
            text = adapter.extract(content)
        except ExtractionError as exc:
            Log.warning(f"Text extraction error on {file_name}: {exc}", extension=extension)
            return ExtractionResult.failed(str(exc))

        Log.debug(
            f"Extracted text from {file_name}",
            extension=extension,
            size_bytes=len(content),
            characters=len(text),
        )
        return ExtractionResult.of_text(text)
