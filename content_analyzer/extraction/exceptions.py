class ExtractionError(Exception):
    """Raised by an extraction engine when it cannot recover text."""
