"""Client library for the Netspeak phrase-search service."""

from loguru import logger

from netspeak_client.config import DEFAULT_BASE_URL, Settings, get_settings
from netspeak_client.schemas import (
    Phrase,
    RawResponse,
    Request,
    Response,
    SearchParameters,
    Word,
    WordTag,
)
from netspeak_client.services.search import NetspeakClient
from netspeak_client.utils.errors import (
    CommunicationError,
    EncodingFault,
    InvalidParameterError,
    MalformedUrlError,
    NetspeakError,
)

# Library records stay silent until the embedding application opts in through
# ``configure_logging`` or ``logger.enable("netspeak_client")``.
logger.disable("netspeak_client")

__all__ = [
    "DEFAULT_BASE_URL",
    "CommunicationError",
    "EncodingFault",
    "InvalidParameterError",
    "MalformedUrlError",
    "NetspeakClient",
    "NetspeakError",
    "Phrase",
    "RawResponse",
    "Request",
    "Response",
    "SearchParameters",
    "Settings",
    "Word",
    "WordTag",
    "get_settings",
]
