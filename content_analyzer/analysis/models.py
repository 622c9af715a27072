from dataclasses import dataclass
from enum import Enum

from content_analyzer.enrichment.models import EnrichmentResult
from content_analyzer.scoring.models import HeuristicAnalysis


class MediaKind(str, Enum):
    PDF = "pdf"
    IMAGE = "image"


@dataclass(frozen=True)
class SourceDocument:
    """An uploaded document, validated and ready for one pipeline run."""

    content: bytes
    media_kind: MediaKind
    mime_type: str
    file_name: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one pipeline run. Never mutated after construction."""

    extracted_text: str
    analysis: HeuristicAnalysis
    file_type: MediaKind
    file_name: str
    enrichment: EnrichmentResult | None = None
    enrichment_error: str | None = None
