from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from dashboard_api.api.dependencies import get_metrics_service, get_publisher
from dashboard_api.main import app
from dashboard_api.services.metrics_service import MetricsService
from shared.errors import BackendQueryError
from shared.notifications import AlertPublisher
from shared.telemetry import Sample

INSTANCE_ID = "i-0abc123"
TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:ec2-alerts"


def ts(minute: int) -> datetime:
    return datetime(2024, 5, 1, 11, minute, tzinfo=timezone.utc)


class FakeFetcher:
    """Serves canned samples keyed by metric name, recording every query."""

    def __init__(self, series=None, listed=None, fail_on=None):
        self.series = series or {}
        self.listed = listed or []
        self.fail_on = set(fail_on or ())
        self.queries = []

    async def fetch_async(self, query):
        self.queries.append(query)
        if query.metric_name in self.fail_on:
            raise BackendQueryError(
                "Rate exceeded",
                operation="get_metric_statistics",
                metric_name=query.metric_name,
            )
        return list(self.series.get(query.metric_name, []))

    async def list_metrics_async(self, namespace, metric_name):
        if metric_name in self.fail_on:
            raise BackendQueryError("denied", operation="list_metrics")
        return list(self.listed)


@pytest.fixture
def fetcher():
    return FakeFetcher(
        series={
            "CPUUtilization": [
                Sample(time=ts(1), value=12.5),
                Sample(time=ts(2), value=40.0),
            ],
            "mem_used_percent": [Sample(time=ts(1), value=63.2)],
            "disk_used_percent": [Sample(time=ts(1), value=71.0)],
            "diskio_read_bytes": [
                Sample(time=ts(1), value=4096.0),
                Sample(time=ts(2), value=8192.0),
            ],
            "diskio_write_bytes": [Sample(time=ts(1), value=1024.0)],
            "NetworkIn": [
                Sample(time=ts(1), value=1048576.0),
                Sample(time=ts(2), value=1572864.0),
            ],
            "NetworkOut": [Sample(time=ts(1), value=524288.0)],
        }
    )


@pytest.fixture
def sns_client():
    """Mock SNS client accepting every publish."""
    client = MagicMock()
    client.publish = MagicMock(return_value={"MessageId": "msg-123"})
    return client


@pytest.fixture
def publisher(sns_client):
    return AlertPublisher(sns_client, TOPIC_ARN)


@pytest.fixture
def test_client(fetcher, publisher):
    """FastAPI test client with fake collaborators injected."""
    app.dependency_overrides[get_metrics_service] = lambda: MetricsService(
        fetcher, INSTANCE_ID
    )
    app.dependency_overrides[get_publisher] = lambda: publisher
    yield TestClient(app)
    app.dependency_overrides.clear()
