from content_analyzer.analysis.aggregator import aggregate
from content_analyzer.analysis.exceptions import AnalysisError, AnalysisFailedError
from content_analyzer.analysis.models import AnalysisResult, SourceDocument
from content_analyzer.analysis.pipeline import AnalysisContext, AnalysisStep
from content_analyzer.analysis.steps import (
    ExtractTextStep,
    NormalizeEnrichmentStep,
    RequestEnrichmentStep,
    ScoreContentStep,
)
from content_analyzer.analysis.validation import build_source_document
from content_analyzer.config.credentials import resolve_api_key
from content_analyzer.config.settings import Settings
from content_analyzer.enrichment.exceptions import EnrichmentError
from content_analyzer.enrichment.factory import EnricherFactory
from content_analyzer.enrichment.orchestrator import EnrichmentOrchestrator
from content_analyzer.extraction.factory import ExtractorFactory
from content_analyzer.extraction.selector import ExtractionStrategySelector
from content_analyzer.logging.logger import Log
from content_analyzer.ocr.base import BaseOcrClient


class ContentAnalyzer:
    """Single entry point of the content-analysis pipeline.

    Pipeline: extract -> score -> (request enrichment -> normalize) -> aggregate.
    Each call is independent; the analyzer holds no per-request state.
    """

    def __init__(
        self,
        selector: ExtractionStrategySelector,
        orchestrator: EnrichmentOrchestrator,
        max_upload_bytes: int,
    ) -> None:
        self._max_upload_bytes = max_upload_bytes
        self._steps: list[AnalysisStep] = [
            ExtractTextStep(selector),
            ScoreContentStep(),
            RequestEnrichmentStep(orchestrator),
            NormalizeEnrichmentStep(),
        ]

    def analyze_upload(
        self,
        content: bytes | None,
        mime_type: str,
        file_name: str,
        enrich: bool = False,
    ) -> AnalysisResult:
        """Validate raw upload fields, then run the pipeline.

        Raises:
            InvalidDocumentError: if the upload fails validation.
            AnalysisFailedError: if no result can be produced.
        """
        document = build_source_document(
            content,
            mime_type=mime_type,
            file_name=file_name,
            max_bytes=self._max_upload_bytes,
        )
        return self.analyze(document, enrich=enrich)

    def analyze(self, document: SourceDocument, enrich: bool = False) -> AnalysisResult:
        Log.info(
            f"Analyzing '{document.file_name}' ({document.media_kind.value}, "
            f"{document.size_bytes} bytes, enrichment={'on' if enrich else 'off'})"
        )
        context = AnalysisContext(document=document, enrichment_requested=enrich)
        try:
            for step in self._steps:
                context = step.run(context)
            return aggregate(context)
        except AnalysisError:
            raise
        except EnrichmentError as exc:
            Log.error(f"Analysis of '{document.file_name}' failed: {exc}")
            raise AnalysisFailedError(str(exc)) from exc
        except Exception as exc:
            Log.error(f"Analysis of '{document.file_name}' failed: {exc}")
            raise AnalysisFailedError("Failed to process file") from exc


def build_analyzer(
    settings: Settings,
    ocr_client: BaseOcrClient | None = None,
) -> ContentAnalyzer:
    """Build a ContentAnalyzer with all required adapters.

    The enrichment credential is resolved here, once.
    """
    selector = ExtractorFactory.create(settings, ocr_client=ocr_client)
    orchestrator = EnricherFactory.create(settings, resolve_api_key(settings))
    return ContentAnalyzer(
        selector=selector,
        orchestrator=orchestrator,
        max_upload_bytes=settings.max_upload_bytes,
    )
