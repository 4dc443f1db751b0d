from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text. An empty string is a legitimate result
            (e.g. a scanned PDF with no text layer).

        Raises:
            ExtractionError: if the file cannot be parsed.
        """
