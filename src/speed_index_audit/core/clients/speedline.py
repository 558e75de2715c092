"""Speedline result sources.

Speed Index itself is computed outside this package by the speedline
library. These helpers fetch an already computed result (over HTTP or from a
JSON file) or run an injected speedline calculator over a trace, and hand the
raw result to the audit. Validation of the result happens in the audit.
"""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Callable, Optional

import httpx

from ..errors import MissingInputError

logger = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


def _get_http_timeout() -> float:
    raw = os.environ.get("SPEED_INDEX_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"SPEED_INDEX_HTTP_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"SPEED_INDEX_HTTP_TIMEOUT must be a positive finite number, got {raw!r}")
    return timeout


async def fetch_speedline_result(url: str, client: Optional[httpx.AsyncClient] = None) -> Any:
    """Fetch a speedline result published as JSON.

    Args:
        url: Where the result lives.
        client: Optional client to reuse. A short-lived one is created otherwise.

    Returns:
        The decoded JSON body, unvalidated.
    """
    logger.debug("Fetching speedline result from %s", url)
    if client is not None:
        response = await client.get(url)
        response.raise_for_status()
        return response.json()

    timeout = _get_http_timeout()
    async with httpx.AsyncClient(timeout=httpx.Timeout(timeout, connect=10.0)) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.json()


async def load_speedline_result(path: str | Path) -> Any:
    """Read a speedline result from a JSON file without blocking the loop."""
    path = Path(path).expanduser()
    logger.debug("Loading speedline result from %s", path)
    text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    return json.loads(text)


class TraceSpeedlineSource:
    """Runs a speedline calculator over raw trace contents when awaited."""

    def __init__(self, trace_contents: Any, speedline: Callable[[list], Any]):
        self.trace_contents = trace_contents
        self._speedline = speedline

    async def __call__(self) -> Any:
        trace = self.trace_contents
        if not trace or not isinstance(trace, list):
            raise MissingInputError()

        result = self._speedline(trace)
        if inspect.isawaitable(result):
            result = await result
        return result
