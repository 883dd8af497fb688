"""Classify a return multiple against market segment thresholds."""

from __future__ import annotations

from roas_engine.benchmarks.schema import BenchmarkSegment
from roas_engine.engine.result import PerformanceAssessment
from roas_engine.models.enums import PerformanceTier


def performance_tier(return_multiple: float, segment: BenchmarkSegment) -> PerformanceTier:
    """Map a return multiple to a tier.

    >= excellent -> EXCELLENT
    >= good      -> GOOD
    >= average   -> AVERAGE
    otherwise    -> BELOW_AVERAGE
    """
    if return_multiple >= segment.excellent_return_multiple:
        return PerformanceTier.EXCELLENT
    if return_multiple >= segment.good_return_multiple:
        return PerformanceTier.GOOD
    if return_multiple >= segment.average_return_multiple:
        return PerformanceTier.AVERAGE
    return PerformanceTier.BELOW_AVERAGE


def vs_market_percent(return_multiple: float, segment: BenchmarkSegment) -> float:
    """Percentage above (positive) or below the segment's average multiple."""
    if segment.average_return_multiple <= 0:
        return 0.0
    return (return_multiple / segment.average_return_multiple - 1) * 100


def assess_performance(
    return_multiple: float, segment: BenchmarkSegment
) -> PerformanceAssessment:
    return PerformanceAssessment(
        segment_id=segment.id,
        tier=performance_tier(return_multiple, segment),
        vs_market_percent=vs_market_percent(return_multiple, segment),
        average_return_multiple=segment.average_return_multiple,
        good_return_multiple=segment.good_return_multiple,
        excellent_return_multiple=segment.excellent_return_multiple,
    )
