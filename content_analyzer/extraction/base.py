from abc import ABC, abstractmethod

from content_analyzer.analysis.models import SourceDocument


class BaseTextExtractor(ABC):
    """Contract for all text extraction engines."""

    @abstractmethod
    def extract(self, document: SourceDocument) -> str:
        """Extract plain text from a document.

        Returns:
            Extracted text as a single stripped string. May be empty.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
