"""Calculation engine: normalizer, solver, scenarios, projector, insights."""

from .calculator import RoasEngine
from .insights import generate_insights
from .normalizer import NormalizedRequest, normalize_request
from .performance import assess_performance
from .projector import project
from .result import (
    CalculationResult,
    ContractProjection,
    PerformanceAssessment,
    PeriodEntry,
    ProjectionTotals,
    ScenarioSet,
)
from .scenarios import apply_scenario_adjustment
from .solver import solve

__all__ = [
    "CalculationResult",
    "ContractProjection",
    "NormalizedRequest",
    "PerformanceAssessment",
    "PeriodEntry",
    "ProjectionTotals",
    "RoasEngine",
    "ScenarioSet",
    "apply_scenario_adjustment",
    "assess_performance",
    "generate_insights",
    "normalize_request",
    "project",
    "solve",
]
