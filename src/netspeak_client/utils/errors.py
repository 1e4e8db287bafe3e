"""Exception hierarchy surfaced by the Netspeak client."""

from __future__ import annotations

from typing import Dict, Optional

ErrorDetails = Dict[str, object]


class NetspeakError(Exception):
    """Base client exception carrying a machine-friendly code."""

    code = "netspeak_error"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[ErrorDetails] = None,
        code: str | None = None,
    ) -> None:
        """Capture the human message, optional structured details and override code."""
        super().__init__(message)
        self.message = message
        # Structured metadata such as the URL or the upstream status code.
        self.details: ErrorDetails = details if details is not None else {}
        self.code = code or self.__class__.code

    def to_payload(self) -> Dict[str, object]:
        """Return a serialisable description of the failure."""
        return {
            "error": {"code": self.code, "message": self.message},
            "details": self.details,
        }


class MalformedUrlError(NetspeakError, ValueError):
    """Raised when base URL and query do not compose a valid absolute URL."""

    code = "malformed_url"


class CommunicationError(NetspeakError, OSError):
    """Raised when the service cannot be reached or its reply cannot be decoded."""

    code = "communication_error"


class EncodingFault(NetspeakError):
    """Raised when a parameter value cannot be encoded as UTF-8 text.

    This points at a broken runtime or corrupted input rather than a
    recoverable condition, so callers are not expected to handle it.
    """

    code = "encoding_fault"


class InvalidParameterError(NetspeakError, ValueError):
    """Raised when a request parameter is not a UTF-8 encodable string."""

    code = "invalid_parameter"


__all__ = [
    "NetspeakError",
    "MalformedUrlError",
    "CommunicationError",
    "EncodingFault",
    "InvalidParameterError",
]
