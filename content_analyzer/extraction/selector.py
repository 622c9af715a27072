"""Chooses an extraction strategy by media kind.

The selector never raises: any engine failure, and any empty result,
degrades to the size-band note for the document.
"""

from content_analyzer.analysis.models import MediaKind, SourceDocument
from content_analyzer.extraction.base import BaseTextExtractor
from content_analyzer.extraction.exceptions import ExtractionError
from content_analyzer.extraction.size_bands import size_band_message
from content_analyzer.logging.logger import Log


class ExtractionStrategySelector:
    def __init__(
        self,
        image_extractor: BaseTextExtractor,
        pdf_extractor: BaseTextExtractor,
    ) -> None:
        self._extractors: dict[MediaKind, BaseTextExtractor] = {
            MediaKind.IMAGE: image_extractor,
            MediaKind.PDF: pdf_extractor,
        }

    def extract(self, document: SourceDocument) -> str:
        extractor = self._extractors[document.media_kind]
        Log.info(
            f"Extracting {document.media_kind.value} '{document.file_name}' "
            f"({document.size_bytes} bytes) with {type(extractor).__name__}"
        )
        try:
            text = extractor.extract(document)
        except ExtractionError as exc:
            Log.warning(f"Extraction failed for '{document.file_name}': {exc}")
            text = ""
        if text:
            return text
        return size_band_message(document.media_kind, document.size_bytes)
