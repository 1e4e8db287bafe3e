"""Search service helpers wrapping the Netspeak API."""

from .netspeak_client import (
    NetspeakClient,
    RawSearchClientProtocol,
    SearchClientProtocol,
    default_executor,
)
from .query import build_query_string, build_url

__all__ = [
    "NetspeakClient",
    "RawSearchClientProtocol",
    "SearchClientProtocol",
    "build_query_string",
    "build_url",
    "default_executor",
]
