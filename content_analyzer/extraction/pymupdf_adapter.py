import pymupdf

from content_analyzer.analysis.models import SourceDocument
from content_analyzer.extraction.base import BaseTextExtractor
from content_analyzer.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, document: SourceDocument) -> str:
        try:
            with pymupdf.open(stream=document.content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
