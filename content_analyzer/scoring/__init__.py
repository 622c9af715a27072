from content_analyzer.scoring.models import HeuristicAnalysis
from content_analyzer.scoring.scorer import readability_label, recommend_platform, score

__all__ = ["HeuristicAnalysis", "readability_label", "recommend_platform", "score"]
