from collections.abc import Sequence

from doc_intake.config.settings import Settings
from doc_intake.database.repositories.document_types_repository import DocumentTypesRepository
from doc_intake.database.repositories.system_settings_repository import SystemSettingsRepository
from doc_intake.extraction.factory import TextExtractorFactory
from doc_intake.intake.engine import ValidationEngine
from doc_intake.intake.models import UploadedFile, ValidationVerdict
from doc_intake.intake.pipeline import IntakeContext, PipelineStep
from doc_intake.intake.steps import (
    AggregateSizeStep,
    EvaluateCorpusStep,
    ExtractFilesStep,
    LoadRuleStep,
)
from doc_intake.logging.logger import Log
from doc_intake.rules.loader import RuleLoader


class IntakeValidator:
    """Runs a submission batch through the intake pipeline.

    Pipeline: load rule -> check and extract each file -> aggregate size ->
    evaluate corpus. The first step that produces a verdict ends the run.
    Holds no per-request state, so one instance serves every request.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def validate(self, doc_type_id: str, files: Sequence[UploadedFile]) -> ValidationVerdict:
        """Validate one batch.

        Raises:
            RuleNotFoundError: if the document type has no rule.
            IntakeConfigurationError: if the configuration store is unusable.
        """
        Log.info(f"Validating {len(files)} file(s) for document type {doc_type_id}")
        context = IntakeContext(doc_type_id=doc_type_id, files=list(files))
        for step in self._steps:
            context = step.run(context)
            if context.verdict is not None:
                break

        if context.verdict is None:
            raise RuntimeError("Intake pipeline finished without a verdict")

        verdict = context.verdict
        Log.info(
            f"Verdict for document type {doc_type_id}",
            passed=verdict.passed,
            word_count=verdict.word_count,
            files=len(verdict.processed_file_names),
            error=verdict.error,
        )
        return verdict


def build_validator(settings: Settings) -> IntakeValidator:
    """Build an IntakeValidator with all required adapters."""
    rule_loader = RuleLoader(
        document_types=DocumentTypesRepository(),
        system_settings=SystemSettingsRepository(),
    )
    return IntakeValidator(
        steps=[
            LoadRuleStep(rule_loader),
            ExtractFilesStep(TextExtractorFactory.create(settings)),
            AggregateSizeStep(),
            EvaluateCorpusStep(ValidationEngine()),
        ]
    )
