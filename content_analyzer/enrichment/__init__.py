from content_analyzer.enrichment.factory import EnricherFactory
from content_analyzer.enrichment.models import EnrichmentResult, PlatformRecommendations
from content_analyzer.enrichment.normalizer import normalize_reply
from content_analyzer.enrichment.orchestrator import EnrichmentOrchestrator
from content_analyzer.enrichment.retry import RetryPolicy

__all__ = [
    "EnricherFactory",
    "EnrichmentOrchestrator",
    "EnrichmentResult",
    "PlatformRecommendations",
    "RetryPolicy",
    "normalize_reply",
]
