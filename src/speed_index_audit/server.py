"""Speed Index Audit MCP Server.

FastMCP server exposing the Speed Index audit as read-only tools.
Run: speed-index-audit
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .core.audit import SPEED_INDEX_METADATA, compute_score, generate_audit_result
from .core.clients import speedline
from .core.distribution import SPEED_INDEX_DISTRIBUTION

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)
READ_ONLY_REMOTE = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)

# Anchor points of the scoring curve, in ms
CURVE_POINTS = [2240.0, 3430.0, 5500.0, 8820.0, 17400.0]

mcp = FastMCP(
    "Speed Index Audit",
    instructions="Score a page's Speed Index (ms) on a 0-100 scale. Scores follow a log-normal curve with a 5,500 ms median.",
)


def _audit_payload(result) -> dict:
    audit_result = generate_audit_result(result)
    payload = audit_result.model_dump(mode="json")
    if result.failed:
        payload["summary"] = f"Speed Index could not be scored: {result.debug_message}"
    else:
        payload["summary"] = f"Speed Index of {result.raw_value:,} ms scores {result.score}/100."
    return payload


# ─── Tool 1: Score a value ───────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def speed_index_score(speed_index: float) -> dict:
    """Score a Speed Index measurement.

    Args:
        speed_index: Speed Index in milliseconds, e.g. 3200.
    """
    result = await compute_score(speed_index)
    return _audit_payload(result)


# ─── Tool 2: Score a published result ────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY_REMOTE)
async def speed_index_score_from_url(url: str) -> dict:
    """Fetch a speedline JSON result (with a `speedIndex` field) and score it.

    Args:
        url: HTTP(S) location of the speedline result.
    """
    result = await compute_score(lambda: speedline.fetch_speedline_result(url))
    return _audit_payload(result)


# ─── Tool 3: Score a result on disk ──────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def speed_index_score_from_file(path: str) -> dict:
    """Load a speedline JSON result from a file and score it.

    Args:
        path: Path to the JSON file.
    """
    result = await compute_score(lambda: speedline.load_speedline_result(path))
    return _audit_payload(result)


# ─── Tool 4: Scoring curve ───────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def speed_index_curve(points: Optional[list[float]] = None) -> dict:
    """Tabulate the scoring curve.

    Args:
        points: Speed Index values in ms to evaluate. Defaults to the curve's anchor points.
    """
    rows = []
    for point in points or CURVE_POINTS:
        result = await compute_score(point)
        rows.append({
            "speed_index": point,
            "score": result.score,
            "percentile": None if result.failed else round(SPEED_INDEX_DISTRIBUTION.compute_complementary_percentile(point), 4),
        })

    return {
        "title": "Speed Index Scoring Curve",
        "median": round(SPEED_INDEX_DISTRIBUTION.median),
        "shape": round(SPEED_INDEX_DISTRIBUTION.shape, 4),
        "points": rows,
    }


# ─── Tool 5: Metadata ────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def speed_index_metadata() -> dict:
    """Static description of the Speed Index audit."""
    return SPEED_INDEX_METADATA.model_dump(mode="json")


def main():
    """Entry point for the CLI command."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
