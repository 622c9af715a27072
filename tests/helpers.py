from content_analyzer.analysis.models import MediaKind, SourceDocument


def make_document(
    size_bytes: int = 1024,
    media_kind: MediaKind = MediaKind.IMAGE,
    file_name: str = "post.png",
    content: bytes | None = None,
) -> SourceDocument:
    mime_type = "application/pdf" if media_kind is MediaKind.PDF else "image/png"
    return SourceDocument(
        content=content if content is not None else b"x" * size_bytes,
        media_kind=media_kind,
        mime_type=mime_type,
        file_name=file_name,
    )


def words(count: int, per_sentence: int | None = None) -> str:
    """Build text with `count` words, optionally ending a sentence every N words."""
    tokens = []
    for i in range(count):
        token = "word"
        if per_sentence and (i + 1) % per_sentence == 0:
            token += "."
        tokens.append(token)
    return " ".join(tokens)
