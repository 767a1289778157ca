import asyncio
from typing import Any, Dict, List

from dashboard_api.metrics.catalog import (
    DISK_DEBUG_METRIC,
    DISK_DEBUG_NAMESPACE,
    INSTANCE_DIMENSION,
    OVERVIEW_ENDPOINTS,
    PAIRED_ENDPOINTS,
    SERIES_ENDPOINTS,
    PairedSeriesEndpoint,
    SeriesEndpoint,
)
from shared.telemetry import MetricFetcher, Sample, combine


class MetricsService:
    """Resolves catalog entries against the fetcher for one monitored instance.

    Errors from the fetcher propagate unchanged; callers decide how to
    surface them.
    """

    def __init__(self, fetcher: MetricFetcher, instance_id: str):
        self.fetcher = fetcher
        self.instance_id = instance_id

    async def get_series(self, name: str) -> List[Sample]:
        endpoint: SeriesEndpoint = SERIES_ENDPOINTS[name]
        return await self.fetcher.fetch_async(endpoint.template.bind(self.instance_id))

    async def get_paired(self, name: str) -> List[Dict[str, Any]]:
        endpoint: PairedSeriesEndpoint = PAIRED_ENDPOINTS[name]
        primary, secondary = await asyncio.gather(
            self.fetcher.fetch_async(endpoint.primary.bind(self.instance_id)),
            self.fetcher.fetch_async(endpoint.secondary.bind(self.instance_id)),
        )
        first_label, second_label = endpoint.labels
        transform = endpoint.transform or (lambda v: v)
        return [
            {
                "time": p.time,
                first_label: transform(p.first),
                second_label: transform(p.second),
            }
            for p in combine(primary, secondary)
        ]

    async def get(self, name: str) -> List[Any]:
        if name in PAIRED_ENDPOINTS:
            return await self.get_paired(name)
        return await self.get_series(name)

    async def get_overview(self) -> Dict[str, List[Any]]:
        results = await asyncio.gather(*(self.get(name) for name in OVERVIEW_ENDPOINTS))
        return dict(zip(OVERVIEW_ENDPOINTS, results))

    async def get_disk_debug(self) -> Dict[str, Any]:
        metrics = await self.fetcher.list_metrics_async(
            DISK_DEBUG_NAMESPACE, DISK_DEBUG_METRIC
        )
        instance_metrics = [
            m
            for m in metrics
            if any(
                d.get("Name") == INSTANCE_DIMENSION and d.get("Value") == self.instance_id
                for d in m.get("Dimensions", [])
            )
        ]
        return {
            "totalMetrics": len(metrics),
            "instanceMetrics": len(instance_metrics),
            "metrics": instance_metrics,
        }
