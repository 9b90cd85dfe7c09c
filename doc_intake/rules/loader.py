from doc_intake.database.repositories.document_types_repository import DocumentTypesRepository
from doc_intake.database.repositories.system_settings_repository import SystemSettingsRepository
from doc_intake.intake.exceptions import RuleNotFoundError
from doc_intake.logging.logger import Log
from doc_intake.rules.models import DocumentTypeRule
from doc_intake.rules.validator import parse_min_word_count, validate_and_build


def min_word_count_key(doc_type_id: str) -> str:
    return f"min_word_count_{doc_type_id}"


class RuleLoader:
    """Composes a DocumentTypeRule from two configuration-store reads.

    The keyword, extension and size columns live on the document type row,
    while the word-count floor lives in the generic settings table under
    ``min_word_count_<doc_type_id>``. Word-count rules can therefore be
    configured per document type without changing the document type schema.
    A missing setting means no minimum.
    """

    def __init__(
        self,
        document_types: DocumentTypesRepository,
        system_settings: SystemSettingsRepository,
    ) -> None:
        self._document_types = document_types
        self._system_settings = system_settings

    def load(self, doc_type_id: str) -> DocumentTypeRule:
        """Load and validate the rule for a document type.

        Raises:
            RuleNotFoundError: if the document type has no rule row.
            MalformedRuleError: if the stored row has an unexpected shape.
        """
        record = self._document_types.find_by_doc_type_id(doc_type_id)
        if record is None:
            raise RuleNotFoundError(f"No validation rule for document type '{doc_type_id}'")

        setting = self._system_settings.find_by_key(min_word_count_key(doc_type_id))
        min_word_count = parse_min_word_count(setting.setting_value if setting else None)

        rule = validate_and_build(record, min_word_count)
        Log.info(
            f"Loaded rule for document type {doc_type_id}",
            required=len(rule.required_keywords),
            forbidden=len(rule.forbidden_keywords),
            allowed_extensions=",".join(rule.allowed_extensions) or "*",
            max_size_mb=rule.max_aggregate_size_mb,
            min_word_count=rule.min_word_count,
        )
        return rule
