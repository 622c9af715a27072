"""Size-banded suitability notes used when no text can be recovered."""

from content_analyzer.analysis.models import MediaKind

SMALL_FILE_MAX_BYTES = 100_000
MEDIUM_FILE_MAX_BYTES = 500_000

SMALL_IMAGE_MESSAGE = (
    "OCR processing failed, but I can see this is a small image. Small images "
    "often work well for quick social media updates and announcements."
)
MEDIUM_IMAGE_MESSAGE = (
    "OCR processing failed, but this appears to be a medium-sized image. Medium "
    "images are great for Instagram posts and Twitter content."
)
LARGE_IMAGE_MESSAGE = (
    "OCR processing failed, but this appears to be a large image with "
    "substantial content. Large images work well for detailed posts on "
    "LinkedIn or Facebook."
)

SMALL_PDF_MESSAGE = (
    "This appears to be a concise PDF document. Small PDFs often contain "
    "focused content like quick tips, checklists, or brief reports. This type "
    "of content works well for social media when you want to share key points "
    "or create quick, digestible posts."
)
MEDIUM_PDF_MESSAGE = (
    "Your PDF contains a well-structured document with moderate content. This "
    "is perfect for creating multiple social media posts or a content series. "
    "You could break this down into several engaging posts that build on each "
    "other."
)
LARGE_PDF_MESSAGE = (
    "This is a comprehensive document with substantial content! Large PDFs "
    "often contain detailed reports, whitepapers, or comprehensive guides. "
    "This material is excellent for creating a content strategy across "
    "multiple social media platforms over several weeks or months."
)

_MESSAGES: dict[MediaKind, tuple[str, str, str]] = {
    MediaKind.IMAGE: (SMALL_IMAGE_MESSAGE, MEDIUM_IMAGE_MESSAGE, LARGE_IMAGE_MESSAGE),
    MediaKind.PDF: (SMALL_PDF_MESSAGE, MEDIUM_PDF_MESSAGE, LARGE_PDF_MESSAGE),
}


def size_band_message(media_kind: MediaKind, size_bytes: int) -> str:
    small, medium, large = _MESSAGES[media_kind]
    if size_bytes < SMALL_FILE_MAX_BYTES:
        return small
    if size_bytes < MEDIUM_FILE_MAX_BYTES:
        return medium
    return large
