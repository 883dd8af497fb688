"""Calculation errors.

Every error aborts the calculation that raised it; nothing is retried and no
partial result is returned. All of them are ``ValueError`` subclasses so
callers validating plain input can catch them uniformly.
"""


class CalculationError(ValueError):
    """Base class for all engine input errors."""


class InvalidSpendError(CalculationError):
    pass


class InvalidCommissionError(CalculationError):
    pass


class InvalidConversionRateError(CalculationError):
    pass


class InvalidCostPerContactError(CalculationError):
    pass


class InsufficientInputError(CalculationError):
    """No target return, no complete explicit metrics and no market segment."""


class UnknownSegmentError(CalculationError):
    pass


class InvalidContractDurationError(CalculationError):
    pass
