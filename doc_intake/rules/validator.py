"""Builds a DocumentTypeRule from raw configuration-store values."""

import re
from typing import Any

from doc_intake.database.models import DocumentTypeRecord
from doc_intake.intake.exceptions import MalformedRuleError
from doc_intake.rules.models import DocumentTypeRule

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def validate_and_build(record: DocumentTypeRecord, min_word_count: int) -> DocumentTypeRule:
    """Validate a document type row and build an immutable rule.

    Raises:
        MalformedRuleError: if any column has an unexpected shape.
    """
    return DocumentTypeRule(
        doc_type_id=record.doc_type_id,
        required_keywords=_string_list(record.required_keywords, "required_keywords"),
        forbidden_keywords=_string_list(record.forbidden_keywords, "forbidden_keywords"),
        allowed_extensions=tuple(
            normalize_extension(ext)
            for ext in _string_list(record.allowed_extensions, "allowed_extensions")
        ),
        max_aggregate_size_mb=_size_cap(record.max_file_size_mb),
        min_word_count=min_word_count,
    )


def parse_min_word_count(raw: str | None) -> int:
    """Parse a stored word-count setting the way an integer prefix is read.

    ``"250"`` and ``"250 words"`` both give 250; empty or unparseable values
    give 0, which disables the minimum.
    """
    if not raw:
        return 0
    match = _LEADING_INT.match(raw)
    if match is None:
        return 0
    return int(match.group(1))


def normalize_extension(extension: str) -> str:
    """Lower-case, trim and drop a single leading dot."""
    cleaned = extension.strip().lower()
    return cleaned[1:] if cleaned.startswith(".") else cleaned


def _string_list(raw: Any, column: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
        raise MalformedRuleError(f"'{column}' must be a list of strings or null")
    for item in raw:
        if not isinstance(item, str):
            raise MalformedRuleError(f"'{column}' must contain only strings")
    return tuple(raw)


def _size_cap(raw: Any) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise MalformedRuleError("'max_file_size_mb' must be a number or null")
    try:
        cap = float(raw)
    except (TypeError, ValueError) as exc:
        raise MalformedRuleError("'max_file_size_mb' must be a number or null") from exc
    if cap < 0:
        raise MalformedRuleError("'max_file_size_mb' must not be negative")
    return cap
