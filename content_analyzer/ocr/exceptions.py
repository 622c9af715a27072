class OcrError(Exception):
    """Raised when the OCR collaborator fails to return recognized text."""
