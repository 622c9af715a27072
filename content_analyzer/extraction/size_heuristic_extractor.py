from content_analyzer.analysis.models import SourceDocument
from content_analyzer.extraction.base import BaseTextExtractor
from content_analyzer.extraction.size_bands import size_band_message


class SizeHeuristicExtractor(BaseTextExtractor):
    """Describes a document by its size band instead of parsing it."""

    def extract(self, document: SourceDocument) -> str:
        return size_band_message(document.media_kind, document.size_bytes)
