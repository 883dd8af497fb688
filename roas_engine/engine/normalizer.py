"""Request validation, period normalization and resolution-mode selection.

Mode precedence (first match wins):
1. target return multiple present and > 0 -> REVERSE_FROM_RETURN
2. order value, cost per contact and conversion rate all present -> EXPLICIT_METRICS
3. market segment id present -> BENCHMARK_FALLBACK
4. otherwise -> InsufficientInputError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from roas_engine.benchmarks.loader import resolve_benchmarks
from roas_engine.benchmarks.schema import BenchmarkSegment, BenchmarkTable
from roas_engine.config.settings import Settings, get_settings
from roas_engine.models.enums import InputMode, Period
from roas_engine.models.errors import (
    InsufficientInputError,
    InvalidCommissionError,
    InvalidConversionRateError,
    InvalidCostPerContactError,
    InvalidSpendError,
    UnknownSegmentError,
)
from roas_engine.models.request import CalculationRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedRequest:
    """A validated request with its mode and metrics resolved."""

    request: CalculationRequest
    spend: float  # monthly
    mode: InputMode
    cost_per_contact: float
    average_order_value: float
    conversion_rate_percent: Optional[float]  # None until solved in reverse mode
    commission_rate_percent: float
    target_return_multiple: Optional[float] = None
    segment: Optional[BenchmarkSegment] = None


def resolve_period(period: Any) -> Period:
    """Map a period value to Period; anything unrecognised is monthly."""
    if isinstance(period, Period):
        return period
    if isinstance(period, str):
        try:
            return Period(period.strip().lower())
        except ValueError:
            pass
    return Period.MONTHLY


def select_mode(request: CalculationRequest) -> InputMode:
    if request.has_target_return():
        return InputMode.REVERSE_FROM_RETURN
    if request.has_explicit_metrics():
        return InputMode.EXPLICIT_METRICS
    if request.market_segment_id is not None:
        return InputMode.BENCHMARK_FALLBACK
    raise InsufficientInputError(
        "Provide a target return multiple, all of average order value, "
        "cost per contact and conversion rate, or a market segment"
    )


def normalize_request(
    request: CalculationRequest,
    benchmarks: Optional[BenchmarkTable] = None,
    settings: Optional[Settings] = None,
) -> NormalizedRequest:
    """Validate a request and resolve the metrics the solver will use."""
    settings = settings or get_settings()

    _validate_spend(request.spend)
    spend = float(request.spend)
    if resolve_period(request.period) is Period.DAILY:
        spend *= settings.daily_to_monthly_factor

    commission = _resolve_commission(request.commission_rate_percent)
    mode = select_mode(request)
    segment = _resolve_segment(request.market_segment_id, mode, benchmarks, settings)

    if mode is InputMode.REVERSE_FROM_RETURN:
        cost_per_contact = _first_present(
            request.cost_per_contact,
            segment.cost_per_contact if segment else None,
            settings.default_cost_per_contact,
        )
        average_order_value = _first_present(
            request.average_order_value,
            segment.average_order_value if segment else None,
            settings.default_average_order_value,
        )
        conversion_rate = None
    elif mode is InputMode.EXPLICIT_METRICS:
        cost_per_contact = request.cost_per_contact
        average_order_value = request.average_order_value
        conversion_rate = request.conversion_rate_percent
    else:
        # Explicit values override the segment metric by metric
        cost_per_contact = _first_present(request.cost_per_contact, segment.cost_per_contact)
        average_order_value = _first_present(
            request.average_order_value, segment.average_order_value
        )
        conversion_rate = _first_present(
            request.conversion_rate_percent, segment.conversion_rate_percent
        )

    _validate_cost_per_contact(cost_per_contact)
    if conversion_rate is not None:
        _validate_conversion_rate(conversion_rate)

    logger.debug(
        f"Resolved {mode.value} mode: monthly spend={spend}, "
        f"cost_per_contact={cost_per_contact}, segment={segment.id if segment else None}"
    )

    return NormalizedRequest(
        request=request,
        spend=spend,
        mode=mode,
        cost_per_contact=float(cost_per_contact),
        average_order_value=float(average_order_value),
        conversion_rate_percent=(
            float(conversion_rate) if conversion_rate is not None else None
        ),
        commission_rate_percent=commission,
        target_return_multiple=(
            request.target_return_multiple if mode is InputMode.REVERSE_FROM_RETURN else None
        ),
        segment=segment,
    )


def _first_present(*values: Optional[float]) -> Optional[float]:
    for value in values:
        if value is not None:
            return value
    return None


def _resolve_segment(
    segment_id: Optional[str],
    mode: InputMode,
    benchmarks: Optional[BenchmarkTable],
    settings: Settings,
) -> Optional[BenchmarkSegment]:
    if segment_id is None:
        return None

    table = resolve_benchmarks(benchmarks, settings)
    segment = table.get(segment_id)
    if segment is None:
        if mode is InputMode.BENCHMARK_FALLBACK:
            raise UnknownSegmentError(f"Unknown market segment '{segment_id}'")
        logger.warning(f"Ignoring unknown market segment '{segment_id}' in {mode.value} mode")
    return segment


def _validate_spend(spend: Optional[float]) -> None:
    # `not > 0` also rejects NaN
    if spend is None or not spend > 0:
        raise InvalidSpendError(f"spend must be greater than zero, got {spend}")


def _resolve_commission(commission: Optional[float]) -> float:
    if commission is None:
        return 0.0
    if not (0 <= commission <= 100):
        raise InvalidCommissionError(
            f"commission_rate_percent must be 0-100, got {commission}"
        )
    return float(commission)


def _validate_cost_per_contact(cost_per_contact: Optional[float]) -> None:
    if cost_per_contact is None or not cost_per_contact > 0:
        raise InvalidCostPerContactError(
            f"cost_per_contact must be greater than zero, got {cost_per_contact}"
        )


def _validate_conversion_rate(rate: float) -> None:
    if not (0 <= rate <= 100):
        raise InvalidConversionRateError(
            f"conversion_rate_percent must be 0-100, got {rate}"
        )
