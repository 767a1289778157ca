from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def minute():
    """Timestamp factory: minute(n) is n minutes before FIXED_NOW."""

    def _at(n: int) -> datetime:
        return FIXED_NOW - timedelta(minutes=n)

    return _at


@pytest.fixture
def cloudwatch_client():
    """Mock CloudWatch client with an empty statistics response."""
    client = MagicMock()
    client.get_metric_statistics = MagicMock(
        return_value={"Label": "CPUUtilization", "Datapoints": []}
    )
    return client


@pytest.fixture
def sns_client():
    """Mock SNS client accepting every publish."""
    client = MagicMock()
    client.publish = MagicMock(return_value={"MessageId": "msg-123"})
    return client
