"""Engine facade.

Binds one benchmark table and one Settings instance so callers (forms,
persistence, export) do not pass them on every call.
"""

from __future__ import annotations

from typing import Optional, Union

from roas_engine.benchmarks.loader import resolve_benchmarks
from roas_engine.benchmarks.schema import BenchmarkTable
from roas_engine.config.settings import Settings, get_settings
from roas_engine.engine.insights import CurrencyFormatter
from roas_engine.engine.performance import assess_performance
from roas_engine.engine.projector import project
from roas_engine.engine.result import (
    CalculationResult,
    ContractProjection,
    PerformanceAssessment,
    ScenarioSet,
)
from roas_engine.engine.scenarios import apply_scenario_adjustment, scenarios
from roas_engine.engine.solver import solve
from roas_engine.models.enums import ScenarioTag
from roas_engine.models.errors import UnknownSegmentError
from roas_engine.models.request import CalculationRequest


class RoasEngine:
    """Stateless engine that runs advertising-return calculations."""

    def __init__(
        self,
        benchmarks: Optional[BenchmarkTable] = None,
        settings: Optional[Settings] = None,
        currency_formatter: Optional[CurrencyFormatter] = None,
    ):
        self.settings = settings or get_settings()
        self.benchmarks = resolve_benchmarks(benchmarks, self.settings)
        self.currency_formatter = currency_formatter

    def solve(self, request: CalculationRequest) -> CalculationResult:
        """Single-period calculation."""
        return solve(request, benchmarks=self.benchmarks, settings=self.settings)

    def project(
        self,
        request: CalculationRequest,
        duration_months: Optional[int] = None,
        growth_rate_percent: Optional[float] = None,
    ) -> ContractProjection:
        """Multi-month projection with compounding spend growth."""
        return project(
            request,
            duration_months=duration_months,
            growth_rate_percent=growth_rate_percent,
            benchmarks=self.benchmarks,
            settings=self.settings,
            currency_formatter=self.currency_formatter,
        )

    def scenarios(self, request: CalculationRequest) -> ScenarioSet:
        """Optimistic, realistic and pessimistic results for one request."""
        return scenarios(request, benchmarks=self.benchmarks, settings=self.settings)

    def apply_scenario_adjustment(
        self, request: CalculationRequest, scenario: Union[ScenarioTag, str]
    ) -> CalculationRequest:
        return apply_scenario_adjustment(
            request, scenario, benchmarks=self.benchmarks, settings=self.settings
        )

    def assess(self, return_multiple: float, segment_id: str) -> PerformanceAssessment:
        """Classify an arbitrary return multiple against a segment."""
        segment = self.benchmarks.get(segment_id)
        if segment is None:
            raise UnknownSegmentError(f"Unknown market segment '{segment_id}'")
        return assess_performance(return_multiple, segment)
