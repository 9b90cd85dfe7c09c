from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from doc_intake.intake.models import BATCH_MULTIPLE, UploadedFile, ValidationVerdict
from doc_intake.rules.models import DocumentTypeRule

FILE_TEXT_SEPARATOR = "\n\n"


@dataclass(slots=True)
class IntakeContext:
    doc_type_id: str
    files: list[UploadedFile]
    rule: DocumentTypeRule | None = None
    processed_file_names: list[str] = field(default_factory=list)
    extracted_texts: list[str] = field(default_factory=list)
    verdict: ValidationVerdict | None = None

    @property
    def corpus(self) -> str:
        """Every file's text in input order, each followed by a blank line."""
        return "".join(text + FILE_TEXT_SEPARATOR for text in self.extracted_texts)

    @property
    def analyzed_extension(self) -> str | None:
        if not self.files:
            return None
        if len(self.files) > 1:
            return BATCH_MULTIPLE
        return self.files[-1].extension

    def require_rule(self) -> DocumentTypeRule:
        if self.rule is None:
            raise ValueError("IntakeContext.rule must be set before this step")
        return self.rule

    def stop(self, passed: bool | None, error: str, needs_server_ocr: bool = False) -> None:
        """Terminate the batch with a verdict built from what was processed so far."""
        self.verdict = ValidationVerdict(
            passed=passed,
            processed_file_names=list(self.processed_file_names),
            error=error,
            needs_server_ocr=needs_server_ocr,
        )


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: IntakeContext) -> IntakeContext:
        raise NotImplementedError
