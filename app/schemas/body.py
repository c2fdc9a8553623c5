"""Body weight schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from app.core.enums import Trend
from app.schemas.base import CamelModel
from app.schemas.workout import RangeFilter


class BodyWeightLog(CamelModel):
    id: str
    date: datetime
    weight: float = Field(..., gt=0, description="Body weight in kg")


class BodyWeightRequest(CamelModel):
    logs: list[BodyWeightLog] = []
    range: RangeFilter = Field(default_factory=RangeFilter)


class BodyWeightStats(CamelModel):
    first: float = 0
    last: float = 0
    change: float = 0
    percent_change: float = 0
    trend: Trend = Trend.STABLE
    entries: int = 0
