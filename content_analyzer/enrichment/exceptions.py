class EnrichmentError(Exception):
    """Base exception for enrichment failures."""


class EnrichmentConfigurationError(EnrichmentError):
    """Raised when enrichment cannot run at all, e.g. no API credential."""


class EnrichmentUpstreamError(EnrichmentError):
    """Raised by a client when one request to the AI provider fails.

    status_code is None when no HTTP response was received (timeout, network).
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EnrichmentFailedError(EnrichmentError):
    """Raised when every allowed attempt against the AI provider failed."""
