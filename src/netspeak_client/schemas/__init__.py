"""Request and response models exchanged with Netspeak."""

from .request import PROTECTED_PARAMETERS, PUBLIC_PARAMETERS, Request, SearchParameters
from .response import (
    Phrase,
    QueryResult,
    RawResponse,
    Response,
    Word,
    WordTag,
    parse_raw_response,
    parse_response,
)

__all__ = [
    "PROTECTED_PARAMETERS",
    "PUBLIC_PARAMETERS",
    "Phrase",
    "QueryResult",
    "RawResponse",
    "Request",
    "Response",
    "SearchParameters",
    "Word",
    "WordTag",
    "parse_raw_response",
    "parse_response",
]
