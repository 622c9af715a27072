"""Coerces an arbitrary AI reply into a total EnrichmentResult.

Parsing is an ordered list of pure strategies; the first one that yields a
JSON object wins. If none does, the whole reply is kept as raw text.
"""

import json
import math
import re
from collections.abc import Callable
from typing import Any

from content_analyzer.enrichment.models import (
    UNAVAILABLE,
    EnrichmentResult,
    PlatformRecommendations,
)
from content_analyzer.logging.logger import Log

ParseStrategy = Callable[[str], dict[str, Any] | None]

_FENCE_RE = re.compile(r"```(?:[A-Za-z0-9_-]+)?\s*\n?(.*?)```", re.DOTALL)


def normalize_reply(reply: str) -> EnrichmentResult:
    """Build a structurally complete EnrichmentResult from any reply string."""
    for name, strategy in PARSE_STRATEGIES:
        parsed = strategy(reply)
        if parsed is not None:
            Log.debug(f"Enrichment reply parsed with '{name}' strategy")
            return build_result(parsed)
    Log.warning("Enrichment reply is not JSON, keeping raw text")
    return EnrichmentResult(raw_analysis=reply.strip() or None)


def parse_direct(reply: str) -> dict[str, Any] | None:
    return _loads_object(reply)


def parse_fenced(reply: str) -> dict[str, Any] | None:
    match = _FENCE_RE.search(reply)
    if match is None:
        return None
    return _loads_object(match.group(1))


def parse_braced(reply: str) -> dict[str, Any] | None:
    start = reply.find("{")
    end = reply.rfind("}")
    if start == -1 or end <= start:
        return None
    return _loads_object(reply[start:end + 1])


PARSE_STRATEGIES: list[tuple[str, ParseStrategy]] = [
    ("direct", parse_direct),
    ("fenced", parse_fenced),
    ("braced", parse_braced),
]


def build_result(data: dict[str, Any]) -> EnrichmentResult:
    return EnrichmentResult(
        content_quality_score=coerce_score(data.get("contentQualityScore")),
        engagement_potential_score=coerce_score(data.get("engagementPotentialScore")),
        brand_voice=coerce_text(data.get("brandVoice")),
        target_audience=coerce_text(data.get("targetAudience")),
        platform_recommendations=_build_platforms(data.get("platformRecommendations")),
        hashtag_strategy=coerce_text_list(data.get("hashtagStrategy")),
        optimal_posting_times=coerce_text_list(data.get("optimalPostingTimes")),
        improvement_suggestions=coerce_text_list(data.get("improvementSuggestions")),
        competitive_analysis=coerce_text(data.get("competitiveAnalysis")),
        roi_potential=coerce_text(data.get("roiPotential")),
    )


def coerce_score(value: Any) -> int:
    """Number or numeric string -> int in [0, 100]; anything else -> 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, min(100, value))
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0
    else:
        return 0
    if not math.isfinite(number):
        return 0
    return int(max(0.0, min(100.0, math.floor(number + 0.5))))


def coerce_text(value: Any) -> str:
    return value if isinstance(value, str) else UNAVAILABLE


def coerce_text_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _build_platforms(raw: Any) -> PlatformRecommendations:
    data = raw if isinstance(raw, dict) else {}
    return PlatformRecommendations(
        twitter=coerce_text(data.get("twitter")),
        instagram=coerce_text(data.get("instagram")),
        linkedin=coerce_text(data.get("linkedin")),
        facebook=coerce_text(data.get("facebook")),
    )


def _loads_object(candidate: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(candidate)
    except (ValueError, TypeError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None
