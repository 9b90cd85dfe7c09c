from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of extracting one file.

    Exactly one of three shapes: plain ``text``, a ``needs_external_ocr``
    handoff, or an ``error`` message.
    """

    text: str = ""
    needs_external_ocr: bool = False
    error: str | None = None

    @classmethod
    def of_text(cls, text: str) -> "ExtractionResult":
        return cls(text=text)

    @classmethod
    def ocr_required(cls) -> "ExtractionResult":
        return cls(needs_external_ocr=True)

    @classmethod
    def failed(cls, error: str) -> "ExtractionResult":
        return cls(error=error)

    @property
    def is_terminal(self) -> bool:
        """True when the batch must stop at this file."""
        return self.needs_external_ocr or self.error is not None
