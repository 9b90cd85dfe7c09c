from dataclasses import dataclass, field
from typing import Any

BATCH_MULTIPLE = "batch_multiple"


def derive_extension(file_name: str) -> str:
    """Lower-cased substring from the last dot, dot included.

    A name without any dot yields the whole lower-cased name.
    """
    lowered = file_name.lower()
    index = lowered.rfind(".")
    return lowered if index < 0 else lowered[index:]


@dataclass(frozen=True)
class UploadedFile:
    """One part of a submission batch, held in memory for a single request."""

    name: str
    content: bytes = field(repr=False)
    size_bytes: int = -1

    def __post_init__(self) -> None:
        if self.size_bytes < 0:
            object.__setattr__(self, "size_bytes", len(self.content))

    @property
    def normalized_name(self) -> str:
        """Lower-cased name used in messages and the processed-files list."""
        return self.name.lower()

    @property
    def extension(self) -> str:
        return derive_extension(self.name)


@dataclass
class ValidationVerdict:
    """The validator's sole output.

    ``passed`` is None when the batch was deferred to external OCR. Fields
    left as None were not computed for this outcome and are omitted from the
    response payload.
    """

    passed: bool | None
    processed_file_names: list[str] = field(default_factory=list)
    error: str | None = None
    missing_keywords: list[str] | None = None
    found_forbidden_keywords: list[str] | None = None
    word_count: int | None = None
    extracted_length: int | None = None
    analyzed_extension: str | None = None
    needs_server_ocr: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON shape consumed by the submission forms."""
        payload: dict[str, Any] = {"pass": self.passed}
        if self.needs_server_ocr:
            payload["needsServerOcr"] = True
        optional = {
            "error": self.error,
            "extractedLength": self.extracted_length,
            "wordCount": self.word_count,
            "missingKeywords": self.missing_keywords,
            "foundForbiddenKeywords": self.found_forbidden_keywords,
            "analyzedExtension": self.analyzed_extension,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        payload["processedFiles"] = list(self.processed_file_names)
        return payload
