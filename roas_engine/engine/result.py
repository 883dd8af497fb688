"""Immutable result data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from roas_engine.models.enums import InputMode, PerformanceTier, ScenarioTag


@dataclass(frozen=True)
class PerformanceAssessment:
    """Return multiple compared against a market segment's thresholds."""

    segment_id: str
    tier: PerformanceTier
    vs_market_percent: float
    average_return_multiple: float
    good_return_multiple: float
    excellent_return_multiple: float


@dataclass(frozen=True)
class CalculationResult:
    """Single-period outputs for one request."""

    mode: InputMode
    spend: float
    contacts: float
    conversions: float
    gross_revenue: float
    net_revenue: float
    commission_amount: float
    return_multiple: float
    return_on_investment_percent: float
    cost_per_conversion: float
    resolved_cost_per_contact: float
    resolved_average_order_value: float
    resolved_conversion_rate_percent: float
    suggested_spend: Optional[float] = None
    competitor_roi_percent: Optional[float] = None
    own_roi_percent: Optional[float] = None
    performance: Optional[PerformanceAssessment] = None


@dataclass(frozen=True)
class PeriodEntry:
    """Single month in a contract projection."""

    period: int
    spend: float
    contacts: float
    conversions: float
    net_revenue: float
    gross_revenue: float
    commission: float
    return_multiple: float
    cumulative_revenue: float
    cumulative_spend: float


@dataclass(frozen=True)
class ProjectionTotals:
    total_spend: float
    total_revenue: float
    total_contacts: float
    total_conversions: float
    average_return_multiple: float
    final_return_multiple: float
    total_net_revenue: float = 0.0
    total_commission: float = 0.0


@dataclass(frozen=True)
class ContractProjection:
    """Top-level result of a multi-month projection."""

    periods: list[PeriodEntry]
    totals: ProjectionTotals
    insights: list[str] = field(default_factory=list)

    @property
    def duration_months(self) -> int:
        return len(self.periods)


@dataclass(frozen=True)
class ScenarioSet:
    """Results for the three scenario variants of one request."""

    optimistic: CalculationResult
    realistic: CalculationResult
    pessimistic: CalculationResult

    def get(self, scenario: Union[ScenarioTag, str]) -> CalculationResult:
        return getattr(self, ScenarioTag(scenario).value)

    def as_dict(self) -> dict[ScenarioTag, CalculationResult]:
        return {tag: self.get(tag) for tag in ScenarioTag}
