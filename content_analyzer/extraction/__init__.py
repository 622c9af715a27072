from content_analyzer.extraction.factory import ExtractorFactory
from content_analyzer.extraction.selector import ExtractionStrategySelector

__all__ = ["ExtractionStrategySelector", "ExtractorFactory"]
