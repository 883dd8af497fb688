"""Tests for return-multiple classification against segment thresholds."""

import pytest

from roas_engine.engine.performance import (
    assess_performance,
    performance_tier,
    vs_market_percent,
)
from roas_engine.models.enums import PerformanceTier


class TestPerformanceTier:
    @pytest.mark.parametrize(
        "multiple, expected",
        [
            (6.0, PerformanceTier.EXCELLENT),
            (5.0, PerformanceTier.EXCELLENT),
            (4.99, PerformanceTier.GOOD),
            (3.0, PerformanceTier.GOOD),
            (2.0, PerformanceTier.AVERAGE),
            (1.99, PerformanceTier.BELOW_AVERAGE),
            (0.0, PerformanceTier.BELOW_AVERAGE),
        ],
    )
    def test_thresholds_inclusive(self, test_segment, multiple, expected):
        assert performance_tier(multiple, test_segment) is expected


class TestVsMarket:
    def test_above_market(self, test_segment):
        assert vs_market_percent(3.0, test_segment) == pytest.approx(50.0)

    def test_below_market(self, test_segment):
        assert vs_market_percent(1.0, test_segment) == pytest.approx(-50.0)

    def test_zero_average_guarded(self, test_segment):
        flat = test_segment.model_copy(
            update={
                "average_return_multiple": 0.0,
                "good_return_multiple": 0.0,
                "excellent_return_multiple": 0.0,
            }
        )
        assert vs_market_percent(3.0, flat) == 0.0


class TestAssessPerformance:
    def test_assessment_echoes_thresholds(self, test_segment):
        assessment = assess_performance(4.0, test_segment)
        assert assessment.segment_id == "test-segment"
        assert assessment.tier is PerformanceTier.GOOD
        assert assessment.vs_market_percent == pytest.approx(100.0)
        assert assessment.average_return_multiple == 2.0
        assert assessment.good_return_multiple == 3.0
        assert assessment.excellent_return_multiple == 5.0
