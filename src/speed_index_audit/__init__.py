"""Speed Index Audit.

Scores a page's Speed Index on a 0-100 log-normal curve, recovering from
missing or broken measurements with an explicit failure result.
"""

__version__ = "0.1.0"

from .core.audit import SPEED_INDEX_METADATA, audit, compute_score, generate_audit_result
from .core.distribution import (
    SPEED_INDEX_DISTRIBUTION,
    LogNormalDistribution,
    complementary_percentile,
    get_log_normal_distribution,
)
from .core.errors import FAILURE_MESSAGE, MissingInputError, UpstreamComputationError
from .core.models import AuditResult, Calibration, ScoreResult, SpeedlineResult

__all__ = [
    "FAILURE_MESSAGE",
    "SPEED_INDEX_DISTRIBUTION",
    "SPEED_INDEX_METADATA",
    "AuditResult",
    "Calibration",
    "LogNormalDistribution",
    "MissingInputError",
    "ScoreResult",
    "SpeedlineResult",
    "UpstreamComputationError",
    "audit",
    "complementary_percentile",
    "compute_score",
    "generate_audit_result",
    "get_log_normal_distribution",
]
