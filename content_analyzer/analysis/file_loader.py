import mimetypes
from pathlib import Path

from content_analyzer.analysis.exceptions import InvalidDocumentError
from content_analyzer.analysis.models import SourceDocument
from content_analyzer.analysis.validation import build_source_document


class FileLoader:
    """Reads a local file and validates it as an upload."""

    def __init__(self, max_bytes: int) -> None:
        self._max_bytes = max_bytes

    def load(self, path: Path) -> SourceDocument:
        """Read document bytes from disk.

        Raises:
            InvalidDocumentError: if the file does not exist or fails validation.
        """
        if not path.is_file():
            raise InvalidDocumentError(f"File not found: {path}")
        mime_type, _ = mimetypes.guess_type(path.name)
        return build_source_document(
            path.read_bytes(),
            mime_type=mime_type or "application/octet-stream",
            file_name=path.name,
            max_bytes=self._max_bytes,
        )
