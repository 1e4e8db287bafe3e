"""Test fixtures for netspeak_client."""

from __future__ import annotations

import json
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterator, List

import httpx
import pytest
from loguru import logger

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from netspeak_client.config import get_settings  # noqa: E402

Handler = Callable[[httpx.Request], httpx.Response]

_SAMPLE_RESPONSE: dict[str, object] = {
    "request": {"query": "waiting ? response", "topk": "2"},
    "phrase": [
        {
            "id": "101",
            "frequency": "5000",
            "word": [
                {"text": "waiting", "tag": "WORD"},
                {"text": "for", "tag": "WORD_FOR_QMARK"},
                {"text": "response", "tag": "WORD"},
            ],
        },
        {
            "id": "102",
            "frequency": "1200",
            "word": [
                {"text": "waiting", "tag": "WORD"},
                {"text": "a", "tag": "WORD_FOR_QMARK"},
                {"text": "response", "tag": "WORD"},
            ],
        },
    ],
    "totalFrequency": "6200",
    "errorCode": 0,
    "queryToken": ["waiting", "?", "response"],
}

_SAMPLE_RAW_RESPONSE: dict[str, object] = {
    "request": {"query": "waiting ? response"},
    "queryResult": [
        {
            "query": {"unit": [{"text": "waiting"}, {"text": "?"}, {"text": "response"}]},
            "unit": [{"text": "waiting"}, {"text": "?"}, {"text": "response"}],
            "phrase": [{"id": 101, "frequency": 5000, "word": [{"text": "waiting"}]}],
            "totalFrequency": 5000,
        }
    ],
}


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and environment overrides between tests."""
    for name in ("NETSPEAK_BASE_URL", "NETSPEAK_TIMEOUT", "NETSPEAK_MAX_WORKERS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_payload() -> dict[str, object]:
    """Protobuf-style search response with two phrases."""
    return json.loads(json.dumps(_SAMPLE_RESPONSE))


@pytest.fixture
def sample_raw_payload() -> dict[str, object]:
    """Raw search response with a single query result."""
    return json.loads(json.dumps(_SAMPLE_RAW_RESPONSE))


@pytest.fixture
def executor() -> Iterator[ThreadPoolExecutor]:
    """Private executor so asynchronous tests never share worker threads."""
    pool = ThreadPoolExecutor(max_workers=4)
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by the mock transports built through ``json_transport``."""
    return []


@pytest.fixture
def json_transport(recorded_requests: List[httpx.Request]) -> Callable[..., httpx.MockTransport]:
    """Build a transport answering every request with the given JSON payload."""

    def factory(payload: object, status_code: int = 200) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def log_records() -> Iterator[List[dict[str, object]]]:
    """Enable the client's records and collect them as decoded dictionaries."""
    records: List[dict[str, object]] = []
    logger.enable("netspeak_client")
    handler_id = logger.add(
        lambda message: records.append(json.loads(message)["record"]), serialize=True
    )
    try:
        yield records
    finally:
        logger.remove(handler_id)
        logger.disable("netspeak_client")
