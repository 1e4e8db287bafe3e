"""Serialization of :class:`Request` objects into Netspeak request URLs."""

from __future__ import annotations

from typing import List
from urllib.parse import quote_plus

import httpx

from netspeak_client.schemas.request import (
    FORMAT,
    PROTECTED_PARAMETERS,
    RAW,
    Request,
    normalize_name,
)
from netspeak_client.utils.errors import EncodingFault, MalformedUrlError

ALLOWED_SCHEMES = frozenset({"http", "https"})


def _encode_value(name: str, value: str) -> str:
    """Percent-encode ``value`` with form encoding over UTF-8.

    ``*`` is Netspeak's wildcard operator and stays literal, as in
    ``application/x-www-form-urlencoded``.
    """
    try:
        return quote_plus(value.strip(), safe="*", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise EncodingFault(
            f"Value of parameter '{name}' cannot be encoded as UTF-8",
            details={"name": name},
        ) from exc


def build_query_string(request: Request, *, raw: bool = False) -> str:
    """Return the query string sent to Netspeak for ``request``.

    ``format=json`` always comes first, followed by ``raw=true`` when intermediate
    retrieval data is requested. Caller entries follow in iteration order with
    trimmed, lower-cased names; protected names are skipped so a caller cannot
    override the response format or the internal probability bounds.
    """
    pairs: List[str] = [f"{FORMAT}=json"]
    if raw:
        pairs.append(f"{RAW}=true")
    for name, value in request.entries():
        param = normalize_name(name)
        if param in PROTECTED_PARAMETERS:
            continue
        pairs.append(f"{param}={_encode_value(param, value)}")
    return "&".join(pairs)


def build_url(base_url: str, request: Request, *, raw: bool = False) -> httpx.URL:
    """Compose ``base_url`` and the serialized ``request`` into an absolute URL.

    The check is purely syntactic and happens before any network I/O, so a
    malformed base URL fails immediately instead of waiting on a timeout.
    """
    composed = f"{base_url}{build_query_string(request, raw=raw)}"
    try:
        url = httpx.URL(composed)
    except httpx.InvalidURL as exc:
        raise MalformedUrlError(f"Malformed URL: {exc}", details={"url": composed}) from exc
    if not url.is_absolute_url or url.scheme not in ALLOWED_SCHEMES or not url.host:
        raise MalformedUrlError(
            f"Malformed URL: '{composed}' is not an absolute http(s) URL",
            details={"url": composed},
        )
    return url


__all__ = ["ALLOWED_SCHEMES", "build_query_string", "build_url"]
