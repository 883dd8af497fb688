"""Pydantic models for market segment benchmark tables."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class BenchmarkSegment(BaseModel):
    """Typical metric values and return-multiple thresholds for one market."""

    id: str = Field(min_length=1)
    name: str
    description: str = ""

    average_order_value: float = Field(ge=0, description="Typical revenue per sale")
    cost_per_contact: float = Field(ge=0, description="Typical spend per lead")
    conversion_rate_percent: float = Field(ge=0, le=100)

    average_return_multiple: float = Field(ge=0, description="Market average ROAS")
    good_return_multiple: float = Field(ge=0)
    excellent_return_multiple: float = Field(ge=0)

    @model_validator(mode="after")
    def average_le_good_le_excellent(self) -> BenchmarkSegment:
        if not (
            self.average_return_multiple
            <= self.good_return_multiple
            <= self.excellent_return_multiple
        ):
            raise ValueError(
                f"Return thresholds must be ordered: average ({self.average_return_multiple}) "
                f"<= good ({self.good_return_multiple}) "
                f"<= excellent ({self.excellent_return_multiple})"
            )
        return self


class BenchmarkTable(BaseModel):
    """Read-only lookup of benchmark segments keyed by id."""

    version: str = "1"
    segments: list[BenchmarkSegment] = Field(min_length=1)

    @field_validator("segments")
    @classmethod
    def segment_ids_unique(cls, v: list[BenchmarkSegment]) -> list[BenchmarkSegment]:
        seen: set[str] = set()
        for segment in v:
            if segment.id in seen:
                raise ValueError(f"Duplicate segment id '{segment.id}'")
            seen.add(segment.id)
        return v

    def get(self, segment_id: str) -> Optional[BenchmarkSegment]:
        """Look up a segment by id, returning None if unknown."""
        for segment in self.segments:
            if segment.id == segment_id:
                return segment
        return None

    def all_segments(self) -> list[BenchmarkSegment]:
        return list(self.segments)

    def ids(self) -> list[str]:
        return [s.id for s in self.segments]
