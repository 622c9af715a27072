from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from tempfile import TemporaryDirectory
from uuid import uuid4

from content_analyzer.analysis.models import SourceDocument

_MAX_SUFFIX_LENGTH = 10


@contextmanager
def staged_upload(document: SourceDocument) -> Generator[Path, None, None]:
    """Write the document bytes to a private temp file, removed on exit.

    Each call gets its own directory, so concurrent requests never share a path.
    Only the extension of the display name is kept.
    """
    with TemporaryDirectory(prefix="content-analyzer-") as tmp_dir:
        path = Path(tmp_dir) / f"{uuid4().hex}{_safe_suffix(document.file_name)}"
        path.write_bytes(document.content)
        yield path


def _safe_suffix(file_name: str) -> str:
    suffix = Path(file_name).suffix
    if len(suffix) > _MAX_SUFFIX_LENGTH or not suffix[1:].isalnum():
        return ""
    return suffix.lower()
