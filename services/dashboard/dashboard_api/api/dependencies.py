from fastapi import Depends, Request

from dashboard_api.core.config import settings
from dashboard_api.services.metrics_service import MetricsService
from shared.notifications import AlertPublisher
from shared.telemetry import MetricFetcher


def get_fetcher(request: Request) -> MetricFetcher:
    return request.app.state.fetcher  # type: ignore[return-value]


def get_publisher(request: Request) -> AlertPublisher:
    return request.app.state.publisher  # type: ignore[return-value]


def get_metrics_service(
    fetcher: MetricFetcher = Depends(get_fetcher),
) -> MetricsService:
    return MetricsService(fetcher, settings.instance_id)
