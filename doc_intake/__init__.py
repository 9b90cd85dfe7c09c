"""Document intake validator: text extraction and rule checks for submissions."""

from doc_intake.intake.models import UploadedFile, ValidationVerdict
from doc_intake.intake.validator import IntakeValidator, build_validator
from doc_intake.rules.models import DocumentTypeRule

__version__ = "0.1.0"

__all__ = [
    "DocumentTypeRule",
    "IntakeValidator",
    "UploadedFile",
    "ValidationVerdict",
    "build_validator",
]
