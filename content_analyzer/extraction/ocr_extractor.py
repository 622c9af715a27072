from content_analyzer.analysis.models import SourceDocument
from content_analyzer.extraction.base import BaseTextExtractor
from content_analyzer.extraction.exceptions import ExtractionError
from content_analyzer.extraction.staging import staged_upload
from content_analyzer.ocr.base import BaseOcrClient
from content_analyzer.ocr.exceptions import OcrError


class OcrTextExtractor(BaseTextExtractor):
    """Extracts text from images through an OCR collaborator."""

    def __init__(self, ocr_client: BaseOcrClient) -> None:
        self._ocr_client = ocr_client

    def extract(self, document: SourceDocument) -> str:
        try:
            with staged_upload(document) as path:
                text = self._ocr_client.recognize(path, document.mime_type)
        except OcrError as exc:
            raise ExtractionError(str(exc)) from exc
        except OSError as exc:
            raise ExtractionError(f"Failed to stage upload for OCR: {exc}") from exc
        if not text:
            raise ExtractionError("OCR recognized no text")
        return text
