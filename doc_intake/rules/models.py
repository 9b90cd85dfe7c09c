from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentTypeRule:
    """Validation rule for one document type, immutable for a single request.

    ``allowed_extensions`` entries are lower-cased, trimmed and carry no
    leading dot. An empty tuple means every extension is accepted.
    """

    doc_type_id: str
    required_keywords: tuple[str, ...] = ()
    forbidden_keywords: tuple[str, ...] = ()
    allowed_extensions: tuple[str, ...] = ()
    max_aggregate_size_mb: float | None = None
    min_word_count: int = 0
