"""Multi-month contract projection with compounding spend growth."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from roas_engine.benchmarks.schema import BenchmarkTable
from roas_engine.config.settings import Settings, get_settings
from roas_engine.engine.insights import CurrencyFormatter, generate_insights
from roas_engine.engine.normalizer import normalize_request
from roas_engine.engine.result import ContractProjection, PeriodEntry, ProjectionTotals
from roas_engine.engine.solver import safe_div, solve
from roas_engine.models.enums import Period
from roas_engine.models.errors import InvalidContractDurationError
from roas_engine.models.request import CalculationRequest

logger = logging.getLogger(__name__)


def period_spend(base_spend: float, growth_rate_percent: float, period: int) -> float:
    """Spend for a 1-based period, compounded from the base in closed form."""
    return base_spend * (1 + growth_rate_percent / 100) ** (period - 1)


def project(
    request: CalculationRequest,
    duration_months: Optional[int] = None,
    growth_rate_percent: Optional[float] = None,
    benchmarks: Optional[BenchmarkTable] = None,
    settings: Optional[Settings] = None,
    currency_formatter: Optional[CurrencyFormatter] = None,
) -> ContractProjection:
    """Project a contract month by month.

    Duration and growth default to the request's own projection fields.
    Daily spend is converted to monthly once, before compounding.
    """
    settings = settings or get_settings()

    if duration_months is None:
        duration_months = request.contract_duration_months
    if growth_rate_percent is None:
        growth_rate_percent = request.monthly_growth_rate_percent or 0.0
    _validate_duration(duration_months, settings.max_contract_months)

    base = normalize_request(request, benchmarks=benchmarks, settings=settings)
    monthly_request = replace(request, period=Period.MONTHLY)

    periods: list[PeriodEntry] = []
    cumulative_revenue = 0.0
    cumulative_spend = 0.0
    total_net_revenue = 0.0
    total_commission = 0.0

    for k in range(1, duration_months + 1):
        spend = period_spend(base.spend, growth_rate_percent, k)
        result = solve(
            replace(monthly_request, spend=spend),
            benchmarks=benchmarks,
            settings=settings,
        )

        cumulative_revenue += result.gross_revenue
        cumulative_spend += spend
        total_net_revenue += result.net_revenue
        total_commission += result.commission_amount

        periods.append(
            PeriodEntry(
                period=k,
                spend=spend,
                contacts=result.contacts,
                conversions=result.conversions,
                net_revenue=result.net_revenue,
                gross_revenue=result.gross_revenue,
                commission=result.commission_amount,
                return_multiple=result.return_multiple,
                cumulative_revenue=cumulative_revenue,
                cumulative_spend=cumulative_spend,
            )
        )

    totals = ProjectionTotals(
        total_spend=cumulative_spend,
        total_revenue=cumulative_revenue,
        total_contacts=sum(p.contacts for p in periods),
        total_conversions=sum(p.conversions for p in periods),
        average_return_multiple=safe_div(cumulative_revenue, cumulative_spend),
        final_return_multiple=periods[-1].return_multiple,
        total_net_revenue=total_net_revenue,
        total_commission=total_commission,
    )

    logger.debug(
        f"Projected {duration_months} months at {growth_rate_percent}% growth: "
        f"spend={cumulative_spend:.2f}, revenue={cumulative_revenue:.2f}"
    )

    return ContractProjection(
        periods=periods,
        totals=totals,
        insights=generate_insights(
            periods, totals, duration_months, currency_formatter=currency_formatter
        ),
    )


def _validate_duration(duration_months: Optional[int], max_months: int) -> None:
    if duration_months is None:
        raise InvalidContractDurationError("contract duration is required for a projection")
    if isinstance(duration_months, bool) or not isinstance(duration_months, int):
        raise InvalidContractDurationError(
            f"contract duration must be a whole number of months, got {duration_months!r}"
        )
    if not (1 <= duration_months <= max_months):
        raise InvalidContractDurationError(
            f"contract duration must be 1-{max_months} months, got {duration_months}"
        )
