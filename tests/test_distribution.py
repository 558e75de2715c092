"""
Tests for the log-normal scoring curve.
These tests verify that:
- The Speed Index curve reproduces its documented percentile anchors
- The median of any valid calibration maps to 0.5
- The curve is bounded and never increases with slower measurements
"""

import math

import pytest
from pydantic import ValidationError

from speed_index_audit.core.distribution import (
    SPEED_INDEX_DISTRIBUTION,
    complementary_percentile,
    get_log_normal_distribution,
)
from speed_index_audit.core.models import Calibration


@pytest.mark.parametrize(
    "speed_index, expected",
    [
        (2240, 0.90),
        (3430, 0.75),
        (5500, 0.50),
        (8820, 0.25),
        (17400, 0.05),
    ],
)
def test_anchor_points(speed_index, expected):
    value = complementary_percentile(SPEED_INDEX_DISTRIBUTION, speed_index)
    assert value == pytest.approx(expected, rel=0.01)


def test_location_pins_the_median():
    assert SPEED_INDEX_DISTRIBUTION.median == pytest.approx(5500)
    assert SPEED_INDEX_DISTRIBUTION.shape == pytest.approx(0.7015, abs=1e-3)


@pytest.mark.parametrize(
    "median, pdr",
    [(5500, 1250), (1000, 200), (4000, 3900), (2_000_000, 1), (1.5, 0.1)],
)
def test_median_scores_half_for_any_calibration(median, pdr):
    model = get_log_normal_distribution(median, pdr)
    assert model.compute_complementary_percentile(median) == pytest.approx(0.5, rel=0.01)


def test_monotonic_non_increasing():
    xs = [0, 1, 10, 100, 500, 1250, 2240, 3430, 5500, 8820, 17400, 50_000, 1_000_000, 1e12]
    values = [SPEED_INDEX_DISTRIBUTION.compute_complementary_percentile(x) for x in xs]
    for faster, slower in zip(values, values[1:]):
        assert faster >= slower


def test_bounded_between_zero_and_one():
    for x in [0, 0.001, 1, 1250, 5500, 1e6, 1e300, math.inf]:
        value = SPEED_INDEX_DISTRIBUTION.compute_complementary_percentile(x)
        assert 0.0 <= value <= 1.0


def test_zero_measurement_is_a_perfect_percentile():
    assert SPEED_INDEX_DISTRIBUTION.compute_complementary_percentile(0) == 1.0


def test_percentile_is_the_complement():
    x = 3430
    assert SPEED_INDEX_DISTRIBUTION.compute_percentile(x) == pytest.approx(
        1 - SPEED_INDEX_DISTRIBUTION.compute_complementary_percentile(x)
    )


def test_distribution_is_immutable():
    with pytest.raises(ValidationError):
        SPEED_INDEX_DISTRIBUTION.location = 0.0


def test_calibration_builds_the_same_curve():
    model = Calibration(median=5500, point_of_diminishing_returns=1250).distribution()
    assert model == SPEED_INDEX_DISTRIBUTION


@pytest.mark.parametrize(
    "median, pdr",
    [(1250, 5500), (5500, 5500), (0, -1), (5500, 0)],
)
def test_calibration_rejects_bad_anchors(median, pdr):
    with pytest.raises(ValidationError):
        Calibration(median=median, point_of_diminishing_returns=pdr)
