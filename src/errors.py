"""
Error taxonomy for the marine conditions core.

Three families of failure reach callers:

- ``InvalidQueryError``: malformed or out-of-range input. Raised before any
  upstream call is made.
- ``UpstreamError``: transport failure or non-success answer from the
  weather or tide provider. Nothing is cached and nothing is retried.
- ``DomainError``: internal misuse, e.g. an unmapped vessel class.

The HTTP layer maps these to status codes; the core never imports FastAPI.
"""

from typing import Any, Dict, Optional


class MarineDataError(Exception):
    """Base class for all errors raised by the core."""

    code = "MARINE_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidQueryError(MarineDataError, ValueError):
    """Input failed validation."""

    code = "VALIDATION_ERROR"


class UpstreamError(MarineDataError):
    """A data provider could not be reached or answered with an error."""

    code = "UPSTREAM_ERROR"

    def __init__(
        self,
        message: str,
        source: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class DomainError(MarineDataError, ValueError):
    """A lookup key or option has no mapping."""

    code = "DOMAIN_ERROR"
