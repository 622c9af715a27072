from content_analyzer.analysis.exceptions import InvalidDocumentError
from content_analyzer.analysis.models import MediaKind, SourceDocument

ACCEPTED_MIME_TYPES = frozenset({
    "application/pdf",
    "image/jpeg",
    "image/png",
    "image/jpg",
})


def build_source_document(
    content: bytes | None,
    mime_type: str,
    file_name: str,
    max_bytes: int,
) -> SourceDocument:
    """Validate an upload and wrap it as a SourceDocument.

    Raises:
        InvalidDocumentError: if the file is missing, of an unsupported
            type, or larger than max_bytes.
    """
    if content is None or not file_name:
        raise InvalidDocumentError("No file provided")
    mime = (mime_type or "").lower()
    if mime not in ACCEPTED_MIME_TYPES:
        raise InvalidDocumentError(
            "Invalid file type. Only PDF and image files are supported."
        )
    if len(content) > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise InvalidDocumentError(f"File size must be less than {limit_mb}MB")
    media_kind = MediaKind.PDF if mime == "application/pdf" else MediaKind.IMAGE
    return SourceDocument(
        content=content,
        media_kind=media_kind,
        mime_type=mime,
        file_name=file_name,
    )
