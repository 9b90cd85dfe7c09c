from doc_intake.intake.models import ValidationVerdict
from doc_intake.rules.models import DocumentTypeRule


def count_words(text: str) -> int:
    """Count whitespace-separated tokens; empty or blank text has zero words."""
    stripped = text.strip()
    if not stripped:
        return 0
    return len(stripped.split())


class ValidationEngine:
    """Evaluates the combined text of a batch against a rule.

    The word-count floor is checked first. When it fails, keyword checks are
    skipped and their fields stay unset on the verdict.
    """

    def evaluate(
        self,
        corpus: str,
        rule: DocumentTypeRule,
        processed_file_names: list[str],
        analyzed_extension: str | None = None,
    ) -> ValidationVerdict:
        word_count = count_words(corpus)
        verdict = ValidationVerdict(
            passed=False,
            processed_file_names=list(processed_file_names),
            word_count=word_count,
            extracted_length=len(corpus),
            analyzed_extension=analyzed_extension,
        )

        if rule.min_word_count > 0 and word_count < rule.min_word_count:
            verdict.error = (
                f"Validation Failed: Document batch contains {word_count} words, "
                f"which is below the minimum required word count of {rule.min_word_count}."
            )
            return verdict

        lowered = corpus.lower()
        verdict.missing_keywords = [
            keyword for keyword in rule.required_keywords if keyword.lower() not in lowered
        ]
        verdict.found_forbidden_keywords = [
            keyword for keyword in rule.forbidden_keywords if keyword.lower() in lowered
        ]
        verdict.passed = not verdict.missing_keywords and not verdict.found_forbidden_keywords
        return verdict
