"""HTTP client dedicated to querying a Netspeak phrase-search service."""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from threading import Lock
from typing import Callable, Protocol, TypeVar, Union

import httpx
from loguru import logger

from netspeak_client.config import DEFAULT_BASE_URL, get_settings
from netspeak_client.schemas.request import Request, SearchParameters
from netspeak_client.schemas.response import (
    RawResponse,
    Response,
    parse_raw_response,
    parse_response,
)
from netspeak_client.services.search.query import build_url
from netspeak_client.utils.errors import CommunicationError
from netspeak_client.utils.logging import log_stage

SearchInput = Union[Request, SearchParameters]
ResponseT = TypeVar("ResponseT", Response, RawResponse)


class SearchClientProtocol(Protocol):
    """Protocol describing the phrase search capability."""

    def search(self, request: SearchInput) -> Response:
        """Execute the search and return the decoded response."""

    def search_async(self, request: SearchInput) -> "Future[Response]":
        """Schedule :meth:`search` and return a handle on its outcome."""


class RawSearchClientProtocol(Protocol):
    """Protocol describing the optional raw search capability."""

    def search_raw(self, request: SearchInput) -> RawResponse:
        """Execute the search and return intermediate retrieval data."""

    def search_raw_async(self, request: SearchInput) -> "Future[RawResponse]":
        """Schedule :meth:`search_raw` and return a handle on its outcome."""


_EXECUTOR_LOCK = Lock()
_SHARED_EXECUTOR: ThreadPoolExecutor | None = None


def default_executor() -> Executor:
    """Return the process-wide executor used when a client is given none.

    The pool is created on first use and sized by ``NETSPEAK_MAX_WORKERS``.
    """
    global _SHARED_EXECUTOR
    with _EXECUTOR_LOCK:
        if _SHARED_EXECUTOR is None:
            _SHARED_EXECUTOR = ThreadPoolExecutor(
                max_workers=get_settings().max_workers,
                thread_name_prefix="netspeak",
            )
        return _SHARED_EXECUTOR


def _as_request(request: SearchInput) -> Request:
    if isinstance(request, SearchParameters):
        return request.to_request()
    return request


def _snapshot(request: SearchInput) -> Request:
    """Copy the parameters so later caller mutations cannot reach a queued search."""
    return Request(dict(_as_request(request).entries()))


class NetspeakClient:
    """Synchronous and asynchronous access to the Netspeak REST interface.

    ``search`` blocks until the :class:`Response` is decoded; ``search_async``
    submits the same work to an executor and returns a
    :class:`concurrent.futures.Future`. The ``*_raw`` variants request
    intermediate retrieval data (:class:`RawResponse`) instead of the final
    phrase list, which is mostly useful for evaluating the service itself.

    Every call opens its own ``httpx.Client`` and only reads ``base_url``, so a
    single instance can serve concurrent searches. Changing ``base_url`` while
    searches are in flight is not synchronised. The executor belongs to the
    caller (or to the process when defaulted) and is never shut down here.
    """

    def __init__(
        self,
        base_url: str | None = None,
        executor: Executor | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self._base_url = settings.base_url if base_url is None else base_url
        self._executor = executor if executor is not None else default_executor()
        self._timeout = settings.timeout if timeout is None else timeout
        self._transport = transport

    @staticmethod
    def get_default_base_url() -> str:
        """Return the base URL of the public Netspeak web service."""
        return DEFAULT_BASE_URL

    @property
    def base_url(self) -> str:
        """Service endpoint the query string is appended to."""
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        # Validation happens when a URL is built for an actual request.
        self._base_url = value

    def get_base_url(self) -> str:
        return self.base_url

    def set_base_url(self, value: str) -> None:
        self.base_url = value

    @property
    def executor(self) -> Executor:
        """Executor running the asynchronous variants."""
        return self._executor

    def search(self, request: SearchInput) -> Response:
        """Send ``request`` and return the decoded :class:`Response`.

        Raises :class:`MalformedUrlError` before any I/O when the composed URL
        is invalid, and :class:`CommunicationError` when the service cannot be
        reached, rejects the request or returns an undecodable body.
        """
        return self._round_trip(request, raw=False, decode=parse_response)

    def search_async(self, request: SearchInput) -> "Future[Response]":
        """Asynchronous counterpart of :meth:`search`."""
        logger.bind(raw=False).debug("netspeak.submitted")
        return self._executor.submit(self.search, _snapshot(request))

    def search_raw(self, request: SearchInput) -> RawResponse:
        """Send ``request`` with ``raw=true`` and return the :class:`RawResponse`."""
        return self._round_trip(request, raw=True, decode=parse_raw_response)

    def search_raw_async(self, request: SearchInput) -> "Future[RawResponse]":
        """Asynchronous counterpart of :meth:`search_raw`."""
        logger.bind(raw=True).debug("netspeak.submitted")
        return self._executor.submit(self.search_raw, _snapshot(request))

    def _round_trip(
        self,
        request: SearchInput,
        *,
        raw: bool,
        decode: Callable[[bytes], ResponseT],
    ) -> ResponseT:
        """Perform one GET round trip and decode the body. No retries."""
        url = build_url(self._base_url, _as_request(request), raw=raw)
        stage = "netspeak.search_raw" if raw else "netspeak.search"
        with log_stage(stage, host=url.host, raw=raw):
            try:
                with httpx.Client(timeout=self._timeout, transport=self._transport) as http_client:
                    response = http_client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise CommunicationError(
                    f"Failed to query Netspeak: {exc}", details={"host": url.host}
                ) from exc
            if response.status_code >= 400:
                raise CommunicationError(
                    f"Netspeak responded with {response.status_code}",
                    details={"status_code": response.status_code},
                )
            return decode(response.content)


__all__ = [
    "NetspeakClient",
    "RawSearchClientProtocol",
    "SearchClientProtocol",
    "SearchInput",
    "default_executor",
]
