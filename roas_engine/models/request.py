from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional, Union

from .enums import Period


@dataclass(frozen=True)
class CalculationRequest:
    """Inputs for one advertising-return calculation.

    Which optional fields are present decides how the engine resolves the
    metrics (see ``roas_engine.engine.normalizer``). Percentages are on a
    0-100 scale.
    """

    spend: float
    period: Union[Period, str] = Period.MONTHLY

    # Reverse mode
    target_return_multiple: Optional[float] = None

    # Explicit metrics
    average_order_value: Optional[float] = None
    cost_per_contact: Optional[float] = None
    conversion_rate_percent: Optional[float] = None

    commission_rate_percent: Optional[float] = None

    # Fixed monthly fees for comparative ROI
    competitor_monthly_fee: Optional[float] = None
    own_monthly_fee: Optional[float] = None

    target_revenue: Optional[float] = None
    market_segment_id: Optional[str] = None

    # Projection only
    contract_duration_months: Optional[int] = None
    monthly_growth_rate_percent: Optional[float] = None

    def has_target_return(self) -> bool:
        return self.target_return_multiple is not None and self.target_return_multiple > 0

    def has_explicit_metrics(self) -> bool:
        return (
            self.average_order_value is not None
            and self.cost_per_contact is not None
            and self.conversion_rate_percent is not None
        )

    def provided_fields(self) -> list[str]:
        """Return names of optional fields that carry a value."""
        return [
            f.name
            for f in fields(self)
            if f.name not in ("spend", "period") and getattr(self, f.name) is not None
        ]
