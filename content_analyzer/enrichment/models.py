from dataclasses import dataclass, field

UNAVAILABLE = "Unavailable"


@dataclass(frozen=True)
class PlatformRecommendations:
    """Per-platform advice. Every platform always has a value."""

    twitter: str = UNAVAILABLE
    instagram: str = UNAVAILABLE
    linkedin: str = UNAVAILABLE
    facebook: str = UNAVAILABLE


@dataclass(frozen=True)
class EnrichmentResult:
    """Total, fixed-shape strategic assessment of a piece of content.

    raw_analysis is only set when the reply could not be parsed as JSON.
    is_placeholder marks a record built after the upstream service failed.
    """

    content_quality_score: int = 0
    engagement_potential_score: int = 0
    brand_voice: str = UNAVAILABLE
    target_audience: str = UNAVAILABLE
    platform_recommendations: PlatformRecommendations = field(
        default_factory=PlatformRecommendations
    )
    hashtag_strategy: list[str] = field(default_factory=list)
    optimal_posting_times: list[str] = field(default_factory=list)
    improvement_suggestions: list[str] = field(default_factory=list)
    competitive_analysis: str = UNAVAILABLE
    roi_potential: str = UNAVAILABLE
    raw_analysis: str | None = None
    is_placeholder: bool = False

    @classmethod
    def placeholder(cls) -> "EnrichmentResult":
        return cls(is_placeholder=True)
