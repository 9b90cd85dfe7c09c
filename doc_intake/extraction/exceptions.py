class ExtractionError(Exception):
    """Raised when a file's content cannot be parsed into text."""
