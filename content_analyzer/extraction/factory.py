from content_analyzer.config.settings import Settings
from content_analyzer.extraction.base import BaseTextExtractor
from content_analyzer.extraction.ocr_extractor import OcrTextExtractor
from content_analyzer.extraction.pdfplumber_adapter import PdfPlumberAdapter
from content_analyzer.extraction.pymupdf_adapter import PyMuPdfAdapter
from content_analyzer.extraction.selector import ExtractionStrategySelector
from content_analyzer.extraction.size_heuristic_extractor import SizeHeuristicExtractor
from content_analyzer.ocr.base import BaseOcrClient
from content_analyzer.ocr.ocr_space_adapter import OcrSpaceAdapter


class ExtractorFactory:
    """Creates the extraction selector based on settings."""

    PDF_ENGINES: dict[str, type[BaseTextExtractor]] = {
        "heuristic": SizeHeuristicExtractor,
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        ocr_client: BaseOcrClient | None = None,
    ) -> ExtractionStrategySelector:
        if ocr_client is None:
            ocr_client = OcrSpaceAdapter(
                api_url=settings.ocr_api_url,
                api_key=settings.ocr_api_key,
                language=settings.ocr_language,
                timeout_seconds=settings.ocr_timeout_seconds,
            )
        return ExtractionStrategySelector(
            image_extractor=OcrTextExtractor(ocr_client),
            pdf_extractor=cls.create_pdf_extractor(settings),
        )

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
