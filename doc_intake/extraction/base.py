from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all per-format text extraction adapters."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from raw file content.

        Args:
            content: Raw file bytes.

        Returns:
            Extracted text without formatting.

        Raises:
            ExtractionError: if the content cannot be parsed.
        """
