from doc_intake.extraction.router import TextExtractor
from doc_intake.intake.engine import ValidationEngine
from doc_intake.intake.gate import aggregate_size_violation, extension_violation, total_size_mb
from doc_intake.intake.pipeline import IntakeContext, PipelineStep
from doc_intake.logging.logger import Log
from doc_intake.rules.loader import RuleLoader


class LoadRuleStep(PipelineStep):
    def __init__(self, rule_loader: RuleLoader) -> None:
        self._rule_loader = rule_loader

    def run(self, context: IntakeContext) -> IntakeContext:
        context.rule = self._rule_loader.load(context.doc_type_id)
        return context


class ExtractFilesStep(PipelineStep):
    """Checks and extracts files one by one, in input order.

    The first disallowed extension, parse failure or image stops the batch.
    Files after that point are never looked at.
    """

    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: IntakeContext) -> IntakeContext:
        rule = context.require_rule()
        for uploaded in context.files:
            name = uploaded.normalized_name
            violation = extension_violation(rule, uploaded)
            if violation is not None:
                Log.info(f"Rejected {name}: extension not allowed")
                context.stop(passed=False, error=violation)
                return context

            context.processed_file_names.append(name)
            result = self._extractor.extract(name, uploaded.extension, uploaded.content)
            if not result.is_terminal:
                context.extracted_texts.append(result.text)
                continue

            if result.needs_external_ocr:
                context.stop(
                    passed=None,
                    error=f"Image detected ({name}). Routing to the OCR service for processing.",
                    needs_server_ocr=True,
                )
            else:
                context.stop(passed=False, error=f"Extraction failed for {name}: {result.error}")
            return context
        return context


class AggregateSizeStep(PipelineStep):
    def run(self, context: IntakeContext) -> IntakeContext:
        violation = aggregate_size_violation(context.require_rule(), context.files)
        if violation is not None:
            Log.info(
                f"Rejected batch for {context.doc_type_id}: size cap exceeded",
                total_mb=round(total_size_mb(context.files), 2),
            )
            context.stop(passed=False, error=violation)
        return context


class EvaluateCorpusStep(PipelineStep):
    def __init__(self, engine: ValidationEngine) -> None:
        self._engine = engine

    def run(self, context: IntakeContext) -> IntakeContext:
        context.verdict = self._engine.evaluate(
            context.corpus,
            context.require_rule(),
            context.processed_file_names,
            analyzed_extension=context.analyzed_extension,
        )
        return context
