from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class DiskDebugResponse(BaseModel):
    totalMetrics: int
    instanceMetrics: int
    metrics: list[dict[str, Any]]


class SeriesPoint(BaseModel):
    time: datetime
    value: float
