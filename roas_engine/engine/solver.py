"""Single-period calculation.

Takes a request, resolves it through the normalizer and produces a
CalculationResult. Pure: no I/O beyond the benchmark lookup, no state.
"""

from __future__ import annotations

from typing import Optional

from roas_engine.benchmarks.schema import BenchmarkTable
from roas_engine.config.settings import Settings
from roas_engine.engine.normalizer import NormalizedRequest, normalize_request
from roas_engine.engine.performance import assess_performance
from roas_engine.engine.result import CalculationResult
from roas_engine.models.enums import InputMode
from roas_engine.models.request import CalculationRequest


def safe_div(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 instead of Infinity/NaN for a zero divisor."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def solve(
    request: CalculationRequest,
    benchmarks: Optional[BenchmarkTable] = None,
    settings: Optional[Settings] = None,
) -> CalculationResult:
    """Compute one month of contacts, conversions, revenue and returns."""
    normalized = normalize_request(request, benchmarks=benchmarks, settings=settings)
    return solve_normalized(normalized)


def solve_normalized(normalized: NormalizedRequest) -> CalculationResult:
    spend = normalized.spend
    cost_per_contact = normalized.cost_per_contact
    average_order_value = normalized.average_order_value

    if normalized.mode is InputMode.REVERSE_FROM_RETURN:
        gross_revenue = spend * normalized.target_return_multiple
        contacts = safe_div(spend, cost_per_contact)
        conversions = safe_div(gross_revenue, average_order_value)
        conversion_rate = safe_div(conversions, contacts) * 100
    elif normalized.mode in (InputMode.EXPLICIT_METRICS, InputMode.BENCHMARK_FALLBACK):
        conversion_rate = normalized.conversion_rate_percent
        contacts = safe_div(spend, cost_per_contact)
        conversions = contacts * (conversion_rate / 100)
        gross_revenue = conversions * average_order_value
    else:
        raise ValueError(f"Unhandled input mode: {normalized.mode}")

    commission = gross_revenue * (normalized.commission_rate_percent / 100)
    net_revenue = gross_revenue - commission
    return_multiple = safe_div(gross_revenue, spend)

    request = normalized.request
    suggested_spend: Optional[float] = None
    if request.target_revenue is not None and return_multiple > 0:
        suggested_spend = request.target_revenue / return_multiple

    performance = None
    if normalized.segment is not None:
        performance = assess_performance(return_multiple, normalized.segment)

    return CalculationResult(
        mode=normalized.mode,
        spend=spend,
        contacts=contacts,
        conversions=conversions,
        gross_revenue=gross_revenue,
        net_revenue=net_revenue,
        commission_amount=commission,
        return_multiple=return_multiple,
        return_on_investment_percent=_roi_percent(net_revenue, spend),
        cost_per_conversion=safe_div(spend, conversions),
        resolved_cost_per_contact=cost_per_contact,
        resolved_average_order_value=average_order_value,
        resolved_conversion_rate_percent=conversion_rate,
        suggested_spend=suggested_spend,
        competitor_roi_percent=_fee_roi_percent(net_revenue, spend, request.competitor_monthly_fee),
        own_roi_percent=_fee_roi_percent(net_revenue, spend, request.own_monthly_fee),
        performance=performance,
    )


def _roi_percent(net_revenue: float, cost: float) -> float:
    return safe_div(net_revenue - cost, cost) * 100


def _fee_roi_percent(
    net_revenue: float, spend: float, monthly_fee: Optional[float]
) -> Optional[float]:
    """ROI once a fixed monthly fee is added to the spend."""
    if monthly_fee is None:
        return None
    return _roi_percent(net_revenue, spend + monthly_fee)
