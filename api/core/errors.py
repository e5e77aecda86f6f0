"""
Error taxonomy shared by the store, the upstream clients and the pipeline.

Each error carries the HTTP status the API layer answers with, so `main.py`
needs a single exception handler for the whole family.
"""

from __future__ import annotations


class ArtworkServiceError(RuntimeError):
    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UpstreamError(ArtworkServiceError):
    """Talking to an upstream HTTP service failed (network, status or decode)."""

    status_code = 502
    code = "upstream_error"


class ExtractionError(ArtworkServiceError):
    """The upstream response does not have the expected envelope shape."""

    status_code = 502
    code = "extraction_error"


class PersistenceError(ArtworkServiceError):
    """A store write or transaction failed."""

    status_code = 500
    code = "persistence_error"


class NotFoundError(ArtworkServiceError):
    status_code = 404
    code = "not_found"
