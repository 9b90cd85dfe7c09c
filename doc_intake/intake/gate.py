"""Extension allow-list and aggregate size checks. Pure functions over inputs."""

from collections.abc import Sequence

from doc_intake.intake.models import UploadedFile
from doc_intake.rules.models import DocumentTypeRule
from doc_intake.rules.validator import normalize_extension

BYTES_PER_MB = 1024 * 1024


def extension_violation(rule: DocumentTypeRule, uploaded: UploadedFile) -> str | None:
    """Return an error message if the file's extension is not allowed.

    An empty allow-list accepts every extension.
    """
    if not rule.allowed_extensions:
        return None
    extension = uploaded.extension
    if normalize_extension(extension) in rule.allowed_extensions:
        return None
    return (
        f"File extension '{extension}' is not permitted for this document type "
        f"(File: {uploaded.normalized_name})."
    )


def total_size_mb(files: Sequence[UploadedFile]) -> float:
    return sum(uploaded.size_bytes for uploaded in files) / BYTES_PER_MB


def aggregate_size_violation(
    rule: DocumentTypeRule, files: Sequence[UploadedFile]
) -> str | None:
    """Return an error message if the whole batch exceeds the size cap.

    A missing or zero cap disables the check.
    """
    cap = rule.max_aggregate_size_mb
    if not cap:
        return None
    total = total_size_mb(files)
    if total <= cap:
        return None
    return (
        f"Total batch file size ({total:.2f}MB) exceeds maximum allowed ({_format_cap(cap)}MB)."
    )


def _format_cap(cap: float) -> str:
    # Shortest round-trip form; whole numbers print without a fraction
    cap = float(cap)
    return str(int(cap)) if cap.is_integer() else repr(cap)
