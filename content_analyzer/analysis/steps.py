from content_analyzer.analysis.pipeline import AnalysisContext, AnalysisStep
from content_analyzer.enrichment.exceptions import EnrichmentFailedError
from content_analyzer.enrichment.models import EnrichmentResult
from content_analyzer.enrichment.normalizer import normalize_reply
from content_analyzer.enrichment.orchestrator import EnrichmentOrchestrator
from content_analyzer.extraction.selector import ExtractionStrategySelector
from content_analyzer.logging.logger import Log
from content_analyzer.scoring.scorer import score


class ExtractTextStep(AnalysisStep):
    def __init__(self, selector: ExtractionStrategySelector) -> None:
        self._selector = selector

    def run(self, context: AnalysisContext) -> AnalysisContext:
        context.extracted_text = self._selector.extract(context.document)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from "
            f"'{context.document.file_name}'"
        )
        return context


class ScoreContentStep(AnalysisStep):
    def run(self, context: AnalysisContext) -> AnalysisContext:
        context.heuristic = score(context.extracted_text)
        Log.debug(
            f"Scored '{context.document.file_name}': "
            f"{context.heuristic.word_count} words, "
            f"readability {context.heuristic.readability_score}"
        )
        return context


class RequestEnrichmentStep(AnalysisStep):
    """Asks the AI provider for a reply; falls back to a placeholder on failure.

    Configuration errors (no credential) are not caught here.
    """

    def __init__(self, orchestrator: EnrichmentOrchestrator) -> None:
        self._orchestrator = orchestrator

    def run(self, context: AnalysisContext) -> AnalysisContext:
        if not context.enrichment_requested:
            return context
        try:
            context.raw_reply = self._orchestrator.request(
                context.extracted_text,
                file_name=context.document.file_name,
                file_type=context.document.media_kind.value,
            )
        except EnrichmentFailedError as exc:
            Log.warning(
                f"Enrichment unavailable for '{context.document.file_name}', "
                f"using placeholder: {exc}"
            )
            context.enrichment = EnrichmentResult.placeholder()
            context.enrichment_error = str(exc)
        return context


class NormalizeEnrichmentStep(AnalysisStep):
    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.raw_reply is None:
            return context
        context.enrichment = normalize_reply(context.raw_reply)
        return context
