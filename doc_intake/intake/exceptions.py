class IntakeError(Exception):
    """Base exception for all intake-validator errors."""


class IntakeConfigurationError(IntakeError):
    """Raised when the server is misconfigured (credentials, pool, rule data)."""


class RuleNotFoundError(IntakeError):
    """Raised when no validation rule exists for a document type."""


class MalformedRuleError(IntakeConfigurationError):
    """Raised when a stored rule row cannot be turned into a DocumentTypeRule."""
