from __future__ import annotations

import enum
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class EstimateSource(enum.Enum):
    ORACLE = "oracle"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Estimate:
    range_km: float
    time_left_hours: float
    efficiency_note: str
    source: EstimateSource = EstimateSource.ORACLE


class _EstimatePayload(BaseModel):
    """Internal Pydantic schema for the model's JSON estimate."""

    model_config = ConfigDict(allow_inf_nan=False, str_strip_whitespace=True)

    range_km: float = Field(..., alias="rangeKm", ge=0, strict=True)
    time_left_hours: float = Field(..., alias="timeLeftHours", ge=0, strict=True)
    efficiency_note: str = Field(..., alias="efficiencyNote", min_length=1)
