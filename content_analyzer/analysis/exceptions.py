from typing import ClassVar


class AnalysisError(Exception):
    """Base exception for errors surfaced to the caller of the analyzer."""

    status: ClassVar[str] = "internal"
    http_status: ClassVar[int] = 500

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "status": self.status}


class InvalidDocumentError(AnalysisError):
    """Raised when the upload is missing, of an unsupported type, or too large."""

    status = "bad_input"
    http_status = 400


class AnalysisFailedError(AnalysisError):
    """Raised when the pipeline cannot produce any result."""
