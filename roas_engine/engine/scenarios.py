"""Optimistic / realistic / pessimistic request variants."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from roas_engine.benchmarks.loader import resolve_benchmarks
from roas_engine.benchmarks.schema import BenchmarkSegment, BenchmarkTable
from roas_engine.config.settings import Settings
from roas_engine.engine.result import ScenarioSet
from roas_engine.engine.solver import solve
from roas_engine.models.enums import ScenarioTag
from roas_engine.models.request import CalculationRequest

logger = logging.getLogger(__name__)

_MAX_CONVERSION_RATE = 100.0


@dataclass(frozen=True)
class ScenarioMultipliers:
    target_return_multiple: float
    cost_per_contact: float
    conversion_rate_percent: float


SCENARIO_MULTIPLIERS: dict[ScenarioTag, ScenarioMultipliers] = {
    ScenarioTag.OPTIMISTIC: ScenarioMultipliers(
        target_return_multiple=1.3,
        cost_per_contact=0.85,
        conversion_rate_percent=1.3,
    ),
    ScenarioTag.PESSIMISTIC: ScenarioMultipliers(
        target_return_multiple=0.75,
        cost_per_contact=1.2,
        conversion_rate_percent=0.75,
    ),
}


def apply_scenario_adjustment(
    request: CalculationRequest,
    scenario: Union[ScenarioTag, str],
    benchmarks: Optional[BenchmarkTable] = None,
    settings: Optional[Settings] = None,
) -> CalculationRequest:
    """Return the request variant for one scenario.

    With a target return multiple only the target is scaled. Otherwise cost
    per contact and conversion rate are scaled; when the request leaves them
    to its market segment, the segment values are the base. Average order
    value is never scaled. A scaled conversion rate is capped at 100, so the
    variant can sit below base x multiplier.
    """
    tag = ScenarioTag(scenario)
    if tag is ScenarioTag.REALISTIC:
        return request

    multipliers = SCENARIO_MULTIPLIERS[tag]

    if request.has_target_return():
        return replace(
            request,
            target_return_multiple=(
                request.target_return_multiple * multipliers.target_return_multiple
            ),
        )

    cost_per_contact = request.cost_per_contact
    conversion_rate = request.conversion_rate_percent
    if cost_per_contact is None or conversion_rate is None:
        segment = _segment_for(request, benchmarks, settings)
        if segment is not None:
            if cost_per_contact is None:
                cost_per_contact = segment.cost_per_contact
            if conversion_rate is None:
                conversion_rate = segment.conversion_rate_percent

    if cost_per_contact is not None:
        cost_per_contact = cost_per_contact * multipliers.cost_per_contact
    if conversion_rate is not None:
        conversion_rate = min(
            conversion_rate * multipliers.conversion_rate_percent, _MAX_CONVERSION_RATE
        )

    return replace(
        request,
        cost_per_contact=cost_per_contact,
        conversion_rate_percent=conversion_rate,
    )


def scenarios(
    request: CalculationRequest,
    benchmarks: Optional[BenchmarkTable] = None,
    settings: Optional[Settings] = None,
) -> ScenarioSet:
    """Solve the optimistic, realistic and pessimistic variants independently.

    Every variant reports the base request's input mode, even when segment
    values filled into a variant would otherwise make it explicit.
    """
    realistic = solve(request, benchmarks=benchmarks, settings=settings)
    results = {ScenarioTag.REALISTIC: realistic}
    for tag in (ScenarioTag.OPTIMISTIC, ScenarioTag.PESSIMISTIC):
        variant = apply_scenario_adjustment(
            request, tag, benchmarks=benchmarks, settings=settings
        )
        result = solve(variant, benchmarks=benchmarks, settings=settings)
        if result.mode is not realistic.mode:
            result = replace(result, mode=realistic.mode)
        results[tag] = result
    return ScenarioSet(
        optimistic=results[ScenarioTag.OPTIMISTIC],
        realistic=results[ScenarioTag.REALISTIC],
        pessimistic=results[ScenarioTag.PESSIMISTIC],
    )


def _segment_for(
    request: CalculationRequest,
    benchmarks: Optional[BenchmarkTable],
    settings: Optional[Settings],
) -> Optional[BenchmarkSegment]:
    if request.market_segment_id is None:
        return None
    table = resolve_benchmarks(benchmarks, settings)
    segment = table.get(request.market_segment_id)
    if segment is None:
        logger.warning(
            f"No benchmark segment '{request.market_segment_id}' to base scenario on"
        )
    return segment
