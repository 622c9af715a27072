from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeuristicAnalysis:
    """Deterministic content-quality signals derived from extracted text."""

    word_count: int = 0
    character_count: int = 0
    readability_score: int = 0
    suggestions: list[str] = field(default_factory=list)
