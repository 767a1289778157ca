from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.constants import Statistics


class Dimension(BaseModel):
    """Name/value tag narrowing a metric to one resource."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str

    def to_cloudwatch(self) -> dict[str, str]:
        return {"Name": self.name, "Value": self.value}


class MetricQuery(BaseModel):
    """One statistics query against the metrics backend.

    The dimension set is expected to identify a single monitored resource;
    this is not checked.
    """

    model_config = ConfigDict(frozen=True)

    metric_name: str
    namespace: str
    lookback_minutes: int = Field(30, gt=0)
    statistic: str = "Average"
    unit: str | None = None
    dimensions: tuple[Dimension, ...] = ()

    @field_validator("statistic")
    @classmethod
    def _known_statistic(cls, v: str) -> str:
        if v not in Statistics.all_statistics():
            raise ValueError(f"Unsupported statistic: {v}")
        return v


class Sample(BaseModel):
    """A single time-stamped value."""

    model_config = ConfigDict(frozen=True)

    time: datetime
    value: float


class PairedSample(BaseModel):
    """Two series joined on timestamp; ``second`` is the secondary series."""

    model_config = ConfigDict(frozen=True)

    time: datetime
    first: float
    second: float
