"""Speed Index metric audit.

Pulls a Speed Index measurement from an external source, scores it on the
log-normal curve, and always returns a structured result. Any failure along
the way becomes a score of -1 with a debug message instead of an exception.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import ValidationError

from .clients.speedline import TraceSpeedlineSource
from .distribution import SPEED_INDEX_DISTRIBUTION
from .errors import MissingInputError, SpeedIndexAuditError, UpstreamComputationError
from .models import Artifacts, AuditMetadata, AuditResult, ScoreResult, SpeedlineResult

logger = logging.getLogger(__name__)

SPEED_INDEX_METADATA = AuditMetadata(
    category="Performance",
    name="speed-index-metric",
    description="Speed Index",
    optimal_value="1,000",
    required_artifacts=("traceContents",),
)


async def _resolve(source: Any) -> Any:
    """Unwrap a value, an awaitable, or a zero-arg callable returning either."""
    if callable(source):
        source = source()
    if inspect.isawaitable(source):
        source = await source
    return source


def _to_speedline_result(value: Any) -> SpeedlineResult:
    if isinstance(value, SpeedlineResult):
        return value
    if isinstance(value, bool) or value is None:
        raise MissingInputError()
    if isinstance(value, (int, float)):
        value = {"speedIndex": value}
    if not isinstance(value, Mapping):
        raise MissingInputError()
    try:
        return SpeedlineResult.model_validate(value)
    except ValidationError as exc:
        raise MissingInputError() from exc


def score_measurement(speed_index: float) -> ScoreResult:
    """Score a valid Speed Index measurement in ms."""
    # Use the CDF of a log-normal distribution for scoring.
    score = 100 * SPEED_INDEX_DISTRIBUTION.compute_complementary_percentile(speed_index)

    # Clamp the score to 0 <= x <= 100.
    score = max(0.0, min(100.0, score))

    return ScoreResult(score=round(score), raw_value=round(speed_index))


async def compute_score(measurement_source: Any) -> ScoreResult:
    """Score the Speed Index supplied by `measurement_source`.

    The source may be a SpeedlineResult, a mapping carrying `speedIndex`, a
    bare number, an awaitable of any of those, or a zero-argument callable
    returning one. Never raises for bad input or upstream failures.
    """
    try:
        results = _to_speedline_result(await _resolve(measurement_source))
        result = score_measurement(results.speed_index)
    except SpeedIndexAuditError as exc:
        logger.warning("Speed Index audit failed: %s", exc)
        return ScoreResult(score=-1, debug_message=str(exc))
    except Exception as exc:
        error = UpstreamComputationError.from_exception(exc)
        logger.warning("Speed Index audit failed upstream: %s", error, exc_info=True)
        return ScoreResult(score=-1, debug_message=str(error))

    logger.debug("Speed Index %d ms scored %d", result.raw_value, result.score)
    return result


def generate_audit_result(result: ScoreResult, metadata: AuditMetadata = SPEED_INDEX_METADATA) -> AuditResult:
    return AuditResult(
        name=metadata.name,
        category=metadata.category,
        description=metadata.description,
        score=result.score,
        raw_value=result.raw_value,
        optimal_value=metadata.optimal_value,
        debug_string=result.debug_message,
    )


def _trace_contents(artifacts: Any) -> Any:
    if isinstance(artifacts, Mapping):
        artifacts = Artifacts.model_validate(artifacts)
    return getattr(artifacts, "trace_contents", None)


async def audit(artifacts: Artifacts | Mapping | None, speedline: Callable[[list], Any]) -> AuditResult:
    """Audit a page load from its gathered artifacts.

    Args:
        artifacts: Gathered artifacts; `traceContents` must be a list of trace events.
        speedline: External Speed Index calculator, sync or async, taking the trace.

    Returns:
        AuditResult scored 0-100, or -1 with a debug string on failure.
    """
    async def trace_source():
        return await TraceSpeedlineSource(_trace_contents(artifacts), speedline)()

    return generate_audit_result(await compute_score(trace_source))
