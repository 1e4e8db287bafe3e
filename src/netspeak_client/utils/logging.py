"""Structured logging utilities leveraging loguru.

Every round trip to the Netspeak service runs inside :func:`log_stage`, which
records whether the stage completed or failed together with its latency and
the context bound by the caller (target host, raw mode). Applications embedding
the client can call :func:`configure_logging` to emit those records as JSON;
until then the package keeps its records disabled.
"""

from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from typing import Iterator

from loguru import logger

from netspeak_client.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Enable the client's records and send them to stdout as JSON."""
    settings = get_settings()
    logger.enable("netspeak_client")
    logger.remove()
    logger.add(sys.stdout, level=(level or settings.log_level).upper(), serialize=True)


@contextmanager
def log_stage(stage: str, **context: object) -> Iterator[None]:
    """Context manager logging stage completion/failure with latency metrics."""
    started_at = time.perf_counter()
    try:
        yield
    except Exception:
        elapsed_ms = (time.perf_counter() - started_at) * 1000
        logger.bind(stage=stage, latency_ms=elapsed_ms, **context).exception("stage.failed")
        raise
    else:
        elapsed_ms = (time.perf_counter() - started_at) * 1000
        logger.bind(stage=stage, latency_ms=elapsed_ms, **context).info("stage.completed")


__all__ = ["configure_logging", "log_stage"]
