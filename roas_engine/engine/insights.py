"""Narrative observations derived from a completed contract projection."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from roas_engine.engine.result import PeriodEntry, ProjectionTotals

CurrencyFormatter = Callable[[float], str]


def format_amount(value: float) -> str:
    """Default formatter: raw amount, two decimals, no currency symbol."""
    return f"{value:,.2f}"


def best_period(periods: Sequence[PeriodEntry]) -> PeriodEntry:
    """Period with the highest gross revenue; the earliest wins a tie."""
    best = periods[0]
    for entry in periods[1:]:
        if entry.gross_revenue > best.gross_revenue:
            best = entry
    return best


def worst_period(periods: Sequence[PeriodEntry]) -> PeriodEntry:
    """Period with the lowest gross revenue; the earliest wins a tie."""
    worst = periods[0]
    for entry in periods[1:]:
        if entry.gross_revenue < worst.gross_revenue:
            worst = entry
    return worst


def generate_insights(
    periods: Sequence[PeriodEntry],
    totals: ProjectionTotals,
    duration_months: int,
    currency_formatter: Optional[CurrencyFormatter] = None,
) -> list[str]:
    """Build the ordered insight lines for a projection.

    Order: growth (multi-period only), ROI, average monthly revenue, best
    month, worst month (only if different from the best), net profit (only
    if strictly positive).
    """
    if not periods:
        return []

    fmt = currency_formatter or format_amount
    insights: list[str] = []

    if len(periods) > 1:
        first, last = periods[0], periods[-1]
        growth = (
            (last.gross_revenue / first.gross_revenue - 1) * 100
            if first.gross_revenue != 0
            else 0.0
        )
        insights.append(
            f"Revenue growth of {growth:.1f}% from month {first.period} to month {last.period}"
        )

    total_net = sum(p.net_revenue for p in periods)
    roi = (
        (total_net - totals.total_spend) / totals.total_spend * 100
        if totals.total_spend != 0
        else 0.0
    )
    months = "month" if duration_months == 1 else "months"
    insights.append(f"Total ROI of {roi:.1f}% over {duration_months} {months} of spend")

    average_revenue = totals.total_revenue / duration_months if duration_months > 0 else 0.0
    insights.append(f"Average monthly revenue of {fmt(average_revenue)}")

    best = best_period(periods)
    insights.append(f"Best month: month {best.period} with {fmt(best.gross_revenue)}")

    worst = worst_period(periods)
    if worst.period != best.period:
        insights.append(
            f"Most challenging month: month {worst.period} with {fmt(worst.gross_revenue)}"
        )

    net_profit = totals.total_revenue - totals.total_spend
    if net_profit > 0:
        insights.append(f"Total net profit of {fmt(net_profit)} over the contract")

    return insights
