"""Dict conversion for persistence and export collaborators.

Output is JSON-compatible: enums become their string values.
"""

from __future__ import annotations

from dataclasses import asdict, fields
from enum import Enum
from typing import Any

from roas_engine.engine.result import CalculationResult, ContractProjection, ScenarioSet
from roas_engine.models.enums import Period
from roas_engine.models.request import CalculationRequest


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_plain(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def request_to_dict(request: CalculationRequest) -> dict:
    """Convert a CalculationRequest to a serializable dict, omitting unset fields."""
    result: dict[str, Any] = {"spend": request.spend, "period": _plain(request.period)}
    for name in request.provided_fields():
        result[name] = getattr(request, name)
    return result


def request_from_dict(d: dict) -> CalculationRequest:
    """Reconstruct a CalculationRequest from a serialized dict.

    Unknown keys are ignored so stored payloads from newer versions still load.
    """
    if "spend" not in d:
        raise KeyError("Serialized request is missing 'spend'")
    known = {f.name for f in fields(CalculationRequest)}
    kwargs = {k: v for k, v in d.items() if k in known}
    kwargs.setdefault("period", Period.MONTHLY.value)
    return CalculationRequest(**kwargs)


def result_to_dict(result: CalculationResult) -> dict:
    """Convert a CalculationResult to a serializable dict."""
    return _plain(asdict(result))


def projection_to_dict(projection: ContractProjection) -> dict:
    """Convert a ContractProjection to a serializable dict."""
    return {
        "periods": [_plain(asdict(p)) for p in projection.periods],
        "totals": _plain(asdict(projection.totals)),
        "insights": list(projection.insights),
    }


def scenarios_to_dict(scenario_set: ScenarioSet) -> dict:
    """Convert a ScenarioSet to a dict keyed by scenario name."""
    return {tag.value: result_to_dict(result) for tag, result in scenario_set.as_dict().items()}
