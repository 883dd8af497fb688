from .enums import InputMode, PerformanceTier, Period, ScenarioTag
from .errors import (
    CalculationError,
    InsufficientInputError,
    InvalidCommissionError,
    InvalidContractDurationError,
    InvalidConversionRateError,
    InvalidCostPerContactError,
    InvalidSpendError,
    UnknownSegmentError,
)
from .request import CalculationRequest

__all__ = [
    "CalculationError",
    "CalculationRequest",
    "InputMode",
    "InsufficientInputError",
    "InvalidCommissionError",
    "InvalidContractDurationError",
    "InvalidConversionRateError",
    "InvalidCostPerContactError",
    "InvalidSpendError",
    "PerformanceTier",
    "Period",
    "ScenarioTag",
    "UnknownSegmentError",
]
