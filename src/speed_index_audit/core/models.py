"""Pydantic data models — the shared audit objects.

The scoring engine, the measurement clients, and the tool server all pass
these models around as the common interface.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SpeedlineResult(BaseModel):
    """Visual progress metrics computed from a trace by the speedline library."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    speed_index: float = Field(alias="speedIndex", ge=0.0, strict=True, allow_inf_nan=False, description="Speed Index in ms")
    perceptual_speed_index: Optional[float] = Field(None, alias="perceptualSpeedIndex")
    beginning: Optional[float] = None
    end: Optional[float] = None
    first: Optional[float] = Field(None, description="First visual change in ms")
    complete: Optional[float] = Field(None, description="Visually complete in ms")
    duration: Optional[float] = None


class Calibration(BaseModel):
    """Anchors for a log-normal scoring curve."""

    model_config = ConfigDict(frozen=True)

    median: float = Field(gt=0.0, description="Measurement that scores 50")
    point_of_diminishing_returns: float = Field(gt=0.0, description="Measurement where score gains flatten out")

    @model_validator(mode="after")
    def _check_order(self) -> "Calibration":
        if self.point_of_diminishing_returns >= self.median:
            raise ValueError("point_of_diminishing_returns must be smaller than median")
        return self

    def distribution(self):
        from .distribution import get_log_normal_distribution

        return get_log_normal_distribution(self.median, self.point_of_diminishing_returns)


class ScoreResult(BaseModel):
    """Outcome of a single scoring attempt: a score or a failure descriptor."""

    score: int = Field(ge=-1, le=100, description="0-100 on success, -1 on failure")
    raw_value: Optional[int] = Field(None, ge=0, description="Rounded measurement in ms")
    debug_message: Optional[str] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "ScoreResult":
        if self.score == -1:
            if not self.debug_message:
                raise ValueError("failed results need a debug_message")
        elif self.raw_value is None:
            raise ValueError("scored results need a raw_value")
        return self

    @property
    def failed(self) -> bool:
        return self.score == -1


class AuditMetadata(BaseModel):
    """Static descriptive constants consumed by the reporting layer."""

    model_config = ConfigDict(frozen=True)

    category: str
    name: str
    description: str
    optimal_value: str
    required_artifacts: tuple[str, ...] = ()


class AuditResult(BaseModel):
    """A scored audit ready for the reporting layer."""

    name: str
    category: str
    description: str
    score: int = Field(ge=-1, le=100)
    raw_value: Optional[int] = None
    optimal_value: str
    debug_string: Optional[str] = None


class Artifacts(BaseModel):
    """Inputs gathered from the page load."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    trace_contents: Any = Field(None, alias="traceContents")
