"""Log-normal scoring curve.

Maps an unbounded, right-skewed timing measurement onto [0, 1] using the
complement of a log-normal CDF. The curve is pinned by two anchors: the
median (scores 0.5) and the point of diminishing returns, below which
getting faster barely moves the score.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from .models import Calibration

# Speed Index policy, in ms. With these anchors the curve reads:
#  10th percentile = 2,240
#  25th percentile = 3,430
#  median          = 5,500
#  75th percentile = 8,820
#  95th percentile = 17,400
SCORING_MEDIAN = 5500
SCORING_POINT_OF_DIMINISHING_RETURNS = 1250

SPEED_INDEX_CALIBRATION = Calibration(
    median=SCORING_MEDIAN,
    point_of_diminishing_returns=SCORING_POINT_OF_DIMINISHING_RETURNS,
)


class LogNormalDistribution(BaseModel):
    """A log-normal distribution given by the mean and std dev of ln(x)."""

    model_config = ConfigDict(frozen=True)

    location: float = Field(description="mu, the mean of ln(x)")
    shape: float = Field(gt=0.0, description="sigma, the std dev of ln(x)")

    @property
    def median(self) -> float:
        return math.exp(self.location)

    def compute_complementary_percentile(self, x: float) -> float:
        """Return 1 - CDF(x). Smaller measurements give values closer to 1."""
        if x <= 0:
            return 1.0
        standardized_x = (math.log(x) - self.location) / (math.sqrt(2) * self.shape)
        return min(1.0, max(0.0, (1 - math.erf(standardized_x)) / 2))

    def compute_percentile(self, x: float) -> float:
        return 1.0 - self.compute_complementary_percentile(x)


def get_log_normal_distribution(median: float, point_of_diminishing_returns: float) -> LogNormalDistribution:
    """Build the distribution whose median is `median` and whose CDF starts
    flattening at `point_of_diminishing_returns`.

    The flattening point is the smaller positive root of the third derivative
    of the log-normal CDF. Solving for sigma in terms of that root and the
    median gives a closed form, so no fitting is needed.
    """
    location = math.log(median)
    log_ratio = math.log(point_of_diminishing_returns / median)
    shape = 0.5 * math.sqrt(1 - 3 * log_ratio - math.sqrt((log_ratio - 3) ** 2 - 8))
    return LogNormalDistribution(location=location, shape=shape)


def complementary_percentile(model: LogNormalDistribution, x: float) -> float:
    return model.compute_complementary_percentile(x)


SPEED_INDEX_DISTRIBUTION = SPEED_INDEX_CALIBRATION.distribution()
