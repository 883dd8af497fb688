"""Tests for scenario adjustment and the three-scenario run."""

import pytest

from roas_engine.engine.scenarios import (
    SCENARIO_MULTIPLIERS,
    apply_scenario_adjustment,
    scenarios,
)
from roas_engine.engine.solver import solve
from roas_engine.models.enums import InputMode, ScenarioTag
from roas_engine.models.request import CalculationRequest
from tests.conftest import make_request


class TestApplyScenarioAdjustment:
    def test_realistic_is_unchanged(self, forward_request):
        assert apply_scenario_adjustment(forward_request, ScenarioTag.REALISTIC) is forward_request

    def test_accepts_string_tag(self, forward_request):
        adjusted = apply_scenario_adjustment(forward_request, "optimistic")
        assert adjusted.cost_per_contact == pytest.approx(42.5)

    def test_unknown_tag_raises(self, forward_request):
        with pytest.raises(ValueError):
            apply_scenario_adjustment(forward_request, "apocalyptic")

    def test_optimistic_explicit_metrics(self, forward_request):
        adjusted = apply_scenario_adjustment(forward_request, ScenarioTag.OPTIMISTIC)
        assert adjusted.cost_per_contact == pytest.approx(50.0 * 0.85)
        assert adjusted.conversion_rate_percent == pytest.approx(3.0 * 1.3)
        assert adjusted.average_order_value == 200.0
        assert adjusted.spend == forward_request.spend

    def test_pessimistic_explicit_metrics(self, forward_request):
        adjusted = apply_scenario_adjustment(forward_request, ScenarioTag.PESSIMISTIC)
        assert adjusted.cost_per_contact == pytest.approx(60.0)
        assert adjusted.conversion_rate_percent == pytest.approx(2.25)
        assert adjusted.average_order_value == 200.0

    def test_target_return_scaled(self, reverse_request):
        optimistic = apply_scenario_adjustment(reverse_request, ScenarioTag.OPTIMISTIC)
        pessimistic = apply_scenario_adjustment(reverse_request, ScenarioTag.PESSIMISTIC)
        assert optimistic.target_return_multiple == pytest.approx(3.9)
        assert pessimistic.target_return_multiple == pytest.approx(2.25)
        assert optimistic.cost_per_contact is None

    def test_target_mode_leaves_metrics_alone(self):
        request = make_request(target_return_multiple=2.0)
        adjusted = apply_scenario_adjustment(request, ScenarioTag.OPTIMISTIC)
        assert adjusted.cost_per_contact == 50.0
        assert adjusted.conversion_rate_percent == 3.0

    def test_conversion_rate_capped_at_100(self):
        request = make_request(conversion_rate_percent=90.0)
        adjusted = apply_scenario_adjustment(request, ScenarioTag.OPTIMISTIC)
        assert adjusted.conversion_rate_percent == 100.0

    def test_segment_values_are_the_base(self, test_table):
        request = CalculationRequest(spend=1000.0, market_segment_id="test-segment")
        adjusted = apply_scenario_adjustment(request, ScenarioTag.PESSIMISTIC, test_table)
        assert adjusted.cost_per_contact == pytest.approx(12.0)
        assert adjusted.conversion_rate_percent == pytest.approx(7.5)
        assert adjusted.average_order_value is None

    def test_original_request_not_mutated(self, forward_request):
        apply_scenario_adjustment(forward_request, ScenarioTag.OPTIMISTIC)
        assert forward_request.cost_per_contact == 50.0

    def test_multiplier_table_covers_non_realistic(self):
        assert set(SCENARIO_MULTIPLIERS) == {ScenarioTag.OPTIMISTIC, ScenarioTag.PESSIMISTIC}


class TestScenarios:
    def test_produces_three_results(self, forward_request, test_table, settings):
        result = scenarios(forward_request, test_table, settings)
        assert set(result.as_dict()) == set(ScenarioTag)

    def test_realistic_matches_base(self, forward_request, test_table, settings):
        result = scenarios(forward_request, test_table, settings)
        assert result.realistic == solve(forward_request, test_table, settings)

    def test_ordering_explicit_metrics(self, test_table, settings):
        request = make_request(
            spend=5000.0, cost_per_contact=21.44, conversion_rate_percent=5.0
        )
        result = scenarios(request, test_table, settings)
        assert result.optimistic.return_multiple >= result.realistic.return_multiple
        assert result.realistic.return_multiple >= result.pessimistic.return_multiple

    def test_ordering_reverse_mode(self, reverse_request, test_table, settings):
        result = scenarios(reverse_request, test_table, settings)
        assert result.optimistic.return_multiple == pytest.approx(3.9)
        assert result.realistic.return_multiple == pytest.approx(3.0)
        assert result.pessimistic.return_multiple == pytest.approx(2.25)

    def test_ordering_benchmark_mode(self, test_table, settings):
        request = CalculationRequest(spend=1000.0, market_segment_id="test-segment")
        result = scenarios(request, test_table, settings)
        assert result.optimistic.gross_revenue > result.realistic.gross_revenue
        assert result.realistic.gross_revenue > result.pessimistic.gross_revenue

    def test_variants_keep_benchmark_mode_with_partial_metrics(self, test_table, settings):
        request = CalculationRequest(
            spend=1000.0, market_segment_id="test-segment", average_order_value=150.0
        )
        result = scenarios(request, test_table, settings)
        modes = {r.mode for r in result.as_dict().values()}
        assert modes == {InputMode.BENCHMARK_FALLBACK}
        assert result.realistic.gross_revenue == pytest.approx(1500.0)
        assert result.optimistic.gross_revenue > result.realistic.gross_revenue

    def test_bundled_segment_variants_share_mode(self, benchmarks, settings):
        request = CalculationRequest(
            spend=1000.0, market_segment_id="ecommerce", average_order_value=300.0
        )
        result = scenarios(request, benchmarks, settings)
        assert result.optimistic.mode is result.realistic.mode
        assert result.pessimistic.mode is result.realistic.mode

    def test_ordering_holds_with_capped_conversion(self, test_table, settings):
        result = scenarios(make_request(conversion_rate_percent=95.0), test_table, settings)
        assert result.optimistic.return_multiple >= result.realistic.return_multiple
        assert result.realistic.return_multiple >= result.pessimistic.return_multiple

    @pytest.mark.parametrize("tag", list(ScenarioTag))
    def test_get_by_tag(self, forward_request, test_table, settings, tag):
        result = scenarios(forward_request, test_table, settings)
        assert result.get(tag) is result.as_dict()[tag]
        assert result.get(tag.value) is result.get(tag)
