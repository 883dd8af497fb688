from roas_engine.engine.calculator import RoasEngine
from roas_engine.engine.projector import project
from roas_engine.engine.result import (
    CalculationResult,
    ContractProjection,
    PerformanceAssessment,
    PeriodEntry,
    ProjectionTotals,
    ScenarioSet,
)
from roas_engine.engine.scenarios import apply_scenario_adjustment, scenarios
from roas_engine.engine.solver import solve
from roas_engine.models import (
    CalculationError,
    CalculationRequest,
    InputMode,
    InsufficientInputError,
    InvalidCommissionError,
    InvalidContractDurationError,
    InvalidConversionRateError,
    InvalidCostPerContactError,
    InvalidSpendError,
    PerformanceTier,
    Period,
    ScenarioTag,
    UnknownSegmentError,
)

__all__ = [
    "CalculationError",
    "CalculationRequest",
    "CalculationResult",
    "ContractProjection",
    "InputMode",
    "InsufficientInputError",
    "InvalidCommissionError",
    "InvalidContractDurationError",
    "InvalidConversionRateError",
    "InvalidCostPerContactError",
    "InvalidSpendError",
    "PerformanceAssessment",
    "PerformanceTier",
    "Period",
    "PeriodEntry",
    "ProjectionTotals",
    "RoasEngine",
    "ScenarioSet",
    "ScenarioTag",
    "UnknownSegmentError",
    "apply_scenario_adjustment",
    "project",
    "scenarios",
    "solve",
]
