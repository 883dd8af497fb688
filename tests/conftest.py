"""Shared test fixtures for the roas-engine test suite."""

import pytest

from roas_engine.benchmarks.loader import load_benchmarks
from roas_engine.benchmarks.schema import BenchmarkSegment, BenchmarkTable
from roas_engine.config.settings import Settings
from roas_engine.engine.calculator import RoasEngine
from roas_engine.models.request import CalculationRequest


def make_request(**overrides) -> CalculationRequest:
    """Forward reference request with minimal boilerplate."""
    values = dict(
        spend=3000.0,
        cost_per_contact=50.0,
        average_order_value=200.0,
        conversion_rate_percent=3.0,
    )
    values.update(overrides)
    return CalculationRequest(**values)


@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only, independent of the environment."""
    return Settings(
        default_cost_per_contact=20.0,
        default_average_order_value=500.0,
        daily_to_monthly_factor=30,
        max_contract_months=60,
        benchmark_config_path="",
    )


@pytest.fixture
def benchmarks() -> BenchmarkTable:
    return load_benchmarks()


@pytest.fixture
def test_segment() -> BenchmarkSegment:
    """Round-number segment used where exact arithmetic is easier to follow."""
    return BenchmarkSegment(
        id="test-segment",
        name="Test Segment",
        average_order_value=100.0,
        cost_per_contact=10.0,
        conversion_rate_percent=10.0,
        average_return_multiple=2.0,
        good_return_multiple=3.0,
        excellent_return_multiple=5.0,
    )


@pytest.fixture
def test_table(test_segment) -> BenchmarkTable:
    return BenchmarkTable(version="test", segments=[test_segment])


@pytest.fixture
def engine(test_table, settings) -> RoasEngine:
    return RoasEngine(benchmarks=test_table, settings=settings)


@pytest.fixture
def forward_request() -> CalculationRequest:
    """spend=3000, cpc=50, aov=200, conversion=3% -> 60 contacts, 1.8 sales, 360 revenue."""
    return make_request()


@pytest.fixture
def reverse_request() -> CalculationRequest:
    """spend=1000 with a 3x target and no metrics -> default cpc/aov."""
    return CalculationRequest(spend=1000.0, target_return_multiple=3.0)
