from abc import ABC, abstractmethod
from dataclasses import dataclass

from content_analyzer.analysis.models import SourceDocument
from content_analyzer.enrichment.models import EnrichmentResult
from content_analyzer.scoring.models import HeuristicAnalysis


@dataclass(slots=True)
class AnalysisContext:
    document: SourceDocument
    enrichment_requested: bool = False
    extracted_text: str = ""
    heuristic: HeuristicAnalysis | None = None
    raw_reply: str | None = None
    enrichment: EnrichmentResult | None = None
    enrichment_error: str | None = None


class AnalysisStep(ABC):
    @abstractmethod
    def run(self, context: AnalysisContext) -> AnalysisContext:
        raise NotImplementedError
