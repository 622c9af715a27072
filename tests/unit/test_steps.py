from unittest.mock import MagicMock

import pytest

from content_analyzer.analysis.aggregator import aggregate
from content_analyzer.analysis.pipeline import AnalysisContext
from content_analyzer.analysis.steps import (
    ExtractTextStep,
    NormalizeEnrichmentStep,
    RequestEnrichmentStep,
    ScoreContentStep,
)
from content_analyzer.enrichment.exceptions import (
    EnrichmentConfigurationError,
    EnrichmentFailedError,
)
from content_analyzer.enrichment.models import EnrichmentResult
from content_analyzer.scoring.scorer import score
from tests.helpers import make_document


def _context(enrich: bool = False, text: str = "Hello world.") -> AnalysisContext:
    return AnalysisContext(
        document=make_document(file_name="post.png"),
        enrichment_requested=enrich,
        extracted_text=text,
    )


class TestExtractTextStep:
    def test_stores_selector_output(self) -> None:
        selector = MagicMock()
        selector.extract.return_value = "From OCR."
        context = _context(text="")

        ExtractTextStep(selector).run(context)

        assert context.extracted_text == "From OCR."
        selector.extract.assert_called_once_with(context.document)


class TestScoreContentStep:
    def test_scores_extracted_text(self) -> None:
        context = ScoreContentStep().run(_context(text="One two three."))
        assert context.heuristic == score("One two three.")


class TestRequestEnrichmentStep:
    def test_skipped_when_not_requested(self) -> None:
        orchestrator = MagicMock()
        context = RequestEnrichmentStep(orchestrator).run(_context(enrich=False))
        assert context.raw_reply is None
        orchestrator.request.assert_not_called()

    def test_stores_raw_reply(self) -> None:
        orchestrator = MagicMock()
        orchestrator.request.return_value = '{"brandVoice": "Calm"}'
        context = RequestEnrichmentStep(orchestrator).run(_context(enrich=True))
        assert context.raw_reply == '{"brandVoice": "Calm"}'
        orchestrator.request.assert_called_once_with(
            "Hello world.", file_name="post.png", file_type="image"
        )

    def test_failure_sets_placeholder_and_error(self) -> None:
        orchestrator = MagicMock()
        orchestrator.request.side_effect = EnrichmentFailedError("429 - busy")
        context = RequestEnrichmentStep(orchestrator).run(_context(enrich=True))
        assert context.raw_reply is None
        assert context.enrichment == EnrichmentResult.placeholder()
        assert context.enrichment_error == "429 - busy"

    def test_configuration_error_propagates(self) -> None:
        orchestrator = MagicMock()
        orchestrator.request.side_effect = EnrichmentConfigurationError("no key")
        with pytest.raises(EnrichmentConfigurationError):
            RequestEnrichmentStep(orchestrator).run(_context(enrich=True))


class TestNormalizeEnrichmentStep:
    def test_no_reply_leaves_context_untouched(self) -> None:
        context = NormalizeEnrichmentStep().run(_context(enrich=True))
        assert context.enrichment is None

    def test_reply_is_normalized(self) -> None:
        context = _context(enrich=True)
        context.raw_reply = '{"roiPotential": "Medium", "contentQualityScore": "88"}'
        NormalizeEnrichmentStep().run(context)
        assert context.enrichment is not None
        assert context.enrichment.roi_potential == "Medium"
        assert context.enrichment.content_quality_score == 88


class TestAggregate:
    def test_requires_heuristic(self) -> None:
        with pytest.raises(ValueError, match="heuristic"):
            aggregate(_context())

    def test_basic_result_has_no_enrichment(self) -> None:
        context = ScoreContentStep().run(_context(enrich=False))
        context.enrichment = EnrichmentResult()

        result = aggregate(context)

        assert result.enrichment is None
        assert result.extracted_text == "Hello world."
        assert result.file_name == "post.png"

    def test_requested_without_reply_gets_placeholder(self) -> None:
        context = ScoreContentStep().run(_context(enrich=True))
        result = aggregate(context)
        assert result.enrichment == EnrichmentResult.placeholder()
