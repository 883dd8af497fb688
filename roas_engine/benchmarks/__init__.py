"""Market segment benchmark tables."""

from .loader import get_default_benchmarks, load_benchmarks, resolve_benchmarks
from .schema import BenchmarkSegment, BenchmarkTable

__all__ = [
    "BenchmarkSegment",
    "BenchmarkTable",
    "get_default_benchmarks",
    "load_benchmarks",
    "resolve_benchmarks",
]
