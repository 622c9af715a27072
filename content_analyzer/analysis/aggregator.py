from content_analyzer.analysis.models import AnalysisResult
from content_analyzer.analysis.pipeline import AnalysisContext
from content_analyzer.enrichment.models import EnrichmentResult


def aggregate(context: AnalysisContext) -> AnalysisResult:
    """Merge the outputs of every step into the caller-facing result."""
    if context.heuristic is None:
        raise ValueError("AnalysisContext.heuristic must be set before aggregation")
    enrichment = context.enrichment
    if context.enrichment_requested and enrichment is None:
        enrichment = EnrichmentResult.placeholder()
    return AnalysisResult(
        extracted_text=context.extracted_text,
        analysis=context.heuristic,
        file_type=context.document.media_kind,
        file_name=context.document.file_name,
        enrichment=enrichment if context.enrichment_requested else None,
        enrichment_error=context.enrichment_error,
    )
