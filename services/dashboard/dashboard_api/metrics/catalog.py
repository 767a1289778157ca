"""Declarative table of the series the dashboard serves.

Each entry is keyed by its path under ``/metrics`` and fixes everything about
the backend query except the monitored instance, which is bound per process
from settings. Routes are registered from these tables.
"""

from dataclasses import dataclass
from typing import Callable

from dashboard_api.metrics.transforms import to_megabytes_text
from shared.constants import Namespaces, Statistics
from shared.telemetry import Dimension, MetricQuery

INSTANCE_DIMENSION = "InstanceId"


@dataclass(frozen=True)
class MetricTemplate:
    metric_name: str
    namespace: str = Namespaces.EC2
    lookback_minutes: int = 30
    statistic: str = Statistics.AVERAGE
    unit: str | None = None
    extra_dimensions: tuple[tuple[str, str], ...] = ()

    def bind(self, instance_id: str) -> MetricQuery:
        dimensions = [Dimension(name=INSTANCE_DIMENSION, value=instance_id)]
        dimensions.extend(Dimension(name=n, value=v) for n, v in self.extra_dimensions)
        return MetricQuery(
            metric_name=self.metric_name,
            namespace=self.namespace,
            lookback_minutes=self.lookback_minutes,
            statistic=self.statistic,
            unit=self.unit,
            dimensions=tuple(dimensions),
        )


@dataclass(frozen=True)
class SeriesEndpoint:
    template: MetricTemplate
    error_message: str
    include_details: bool = False


@dataclass(frozen=True)
class PairedSeriesEndpoint:
    primary: MetricTemplate
    secondary: MetricTemplate
    labels: tuple[str, str]
    error_message: str
    include_details: bool = False
    transform: Callable[[float], object] | None = None


CPU = MetricTemplate("CPUUtilization")
MEMORY = MetricTemplate(
    "mem_used_percent", namespace=Namespaces.CW_AGENT, unit="Percent"
)
ROOT_DISK = MetricTemplate(
    "disk_used_percent",
    namespace=Namespaces.CW_AGENT,
    lookback_minutes=60,
    unit="Percent",
    extra_dimensions=(("path", "/"), ("device", "xvda1"), ("fstype", "xfs")),
)
ALL_DISKS = MetricTemplate(
    "disk_used_percent",
    namespace=Namespaces.CW_AGENT,
    lookback_minutes=60,
    unit="Percent",
)

SERIES_ENDPOINTS: dict[str, SeriesEndpoint] = {
    "cpu": SeriesEndpoint(CPU, "Failed to fetch CPU metrics"),
    "memory": SeriesEndpoint(MEMORY, "Failed to fetch memory metrics"),
    "disk": SeriesEndpoint(
        ROOT_DISK, "Failed to fetch disk metrics", include_details=True
    ),
    "disk/root": SeriesEndpoint(ROOT_DISK, "Failed to fetch root disk metrics"),
    "disk/all": SeriesEndpoint(ALL_DISKS, "Failed to fetch disk metrics"),
    "statsd/requests": SeriesEndpoint(
        MetricTemplate(
            "requests.count", namespace=Namespaces.STATSD, statistic=Statistics.SUM
        ),
        "Failed to fetch requests count",
    ),
    "statsd/latency": SeriesEndpoint(
        MetricTemplate(
            "latency.avg", namespace=Namespaces.STATSD, unit="Milliseconds"
        ),
        "Failed to fetch latency",
    ),
    "statsd/errors": SeriesEndpoint(
        MetricTemplate(
            "errors.count", namespace=Namespaces.STATSD, statistic=Statistics.SUM
        ),
        "Failed to fetch errors count",
    ),
    "statsd/memory": SeriesEndpoint(
        MetricTemplate(
            "memory.usage", namespace=Namespaces.STATSD, unit="Megabytes"
        ),
        "Failed to fetch memory usage",
    ),
}

PAIRED_ENDPOINTS: dict[str, PairedSeriesEndpoint] = {
    "diskio": PairedSeriesEndpoint(
        primary=MetricTemplate(
            "diskio_read_bytes",
            namespace=Namespaces.CW_AGENT,
            statistic=Statistics.SUM,
            unit="Bytes",
        ),
        secondary=MetricTemplate(
            "diskio_write_bytes",
            namespace=Namespaces.CW_AGENT,
            statistic=Statistics.SUM,
            unit="Bytes",
        ),
        labels=("read", "write"),
        error_message="Failed to fetch disk I/O metrics",
        include_details=True,
    ),
    "network": PairedSeriesEndpoint(
        primary=MetricTemplate("NetworkIn", unit="Bytes"),
        secondary=MetricTemplate("NetworkOut", unit="Bytes"),
        labels=("in", "out"),
        error_message="Failed to fetch network metrics",
        transform=to_megabytes_text,
    ),
}

# Series the dashboard loads together on every refresh
OVERVIEW_ENDPOINTS = ("cpu", "memory", "disk", "diskio", "network")

# Diagnostic listing of disk usage series
DISK_DEBUG_NAMESPACE = Namespaces.CW_AGENT
DISK_DEBUG_METRIC = "disk_used_percent"
