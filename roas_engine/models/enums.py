from enum import Enum


class Period(str, Enum):
    MONTHLY = "monthly"
    DAILY = "daily"


class InputMode(str, Enum):
    REVERSE_FROM_RETURN = "reverse_from_return"
    EXPLICIT_METRICS = "explicit_metrics"
    BENCHMARK_FALLBACK = "benchmark_fallback"


class ScenarioTag(str, Enum):
    OPTIMISTIC = "optimistic"
    REALISTIC = "realistic"
    PESSIMISTIC = "pessimistic"


class PerformanceTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    BELOW_AVERAGE = "below_average"
