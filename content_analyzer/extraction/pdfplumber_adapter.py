import io

import pdfplumber

from content_analyzer.analysis.models import SourceDocument
from content_analyzer.extraction.base import BaseTextExtractor
from content_analyzer.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, document: SourceDocument) -> str:
        try:
            with pdfplumber.open(io.BytesIO(document.content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
