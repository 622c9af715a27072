from abc import ABC, abstractmethod
from pathlib import Path


class BaseOcrClient(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def recognize(self, image_path: Path, mime_type: str) -> str:
        """Recognize text in an image file.

        Args:
            image_path: Path to the staged image file.
            mime_type: Declared MIME type of the image.

        Returns:
            Recognized text, stripped. May be empty.

        Raises:
            OcrError: on network failure, timeout, non-2xx status or a
                processing error reported by the service.
        """
