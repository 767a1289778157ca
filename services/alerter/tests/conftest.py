from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from shared.notifications import AlertPublisher
from shared.telemetry import MetricFetcher

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:ec2-alerts"


@pytest.fixture
def cpu_datapoints():
    """Set the Average datapoints CloudWatch returns, newest first."""

    def _set(client, values):
        client.get_metric_statistics.return_value = {
            "Datapoints": [
                {"Timestamp": NOW - timedelta(minutes=5 * i), "Average": v}
                for i, v in enumerate(values)
            ]
        }

    return _set


@pytest.fixture
def cloudwatch_client():
    client = MagicMock()
    client.get_metric_statistics = MagicMock(return_value={"Datapoints": []})
    return client


@pytest.fixture
def sns_client():
    client = MagicMock()
    client.publish = MagicMock(return_value={"MessageId": "msg-456"})
    return client


@pytest.fixture
def fetcher(cloudwatch_client):
    return MetricFetcher(cloudwatch_client, period_seconds=300, clock=lambda: NOW)


@pytest.fixture
def publisher(sns_client):
    return AlertPublisher(sns_client, TOPIC_ARN)
