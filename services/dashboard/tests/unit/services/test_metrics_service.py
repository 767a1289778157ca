import asyncio

import pytest

from dashboard_api.services.metrics_service import MetricsService
from shared.errors import BackendQueryError

INSTANCE_ID = "i-0abc123"


@pytest.mark.asyncio
async def test_get_series_binds_instance(fetcher):
    svc = MetricsService(fetcher, INSTANCE_ID)

    samples = await svc.get_series("cpu")

    assert [s.value for s in samples] == [12.5, 40.0]
    query = fetcher.queries[0]
    assert query.metric_name == "CPUUtilization"
    assert query.namespace == "AWS/EC2"
    assert query.statistic == "Average"
    assert query.dimensions[0].name == "InstanceId"
    assert query.dimensions[0].value == INSTANCE_ID


@pytest.mark.asyncio
async def test_get_paired_without_transform_keeps_numbers(fetcher):
    svc = MetricsService(fetcher, INSTANCE_ID)

    records = await svc.get_paired("diskio")

    assert records[0]["read"] == 4096.0
    assert records[0]["write"] == 1024.0
    assert records[1]["write"] == 0.0
    assert {q.metric_name for q in fetcher.queries} == {
        "diskio_read_bytes",
        "diskio_write_bytes",
    }


@pytest.mark.asyncio
async def test_paired_fetches_run_concurrently(fetcher):
    started = []
    release = asyncio.Event()
    original = fetcher.fetch_async

    async def _blocking_fetch(query):
        started.append(query.metric_name)
        if len(started) == 2:
            release.set()
        await asyncio.wait_for(release.wait(), timeout=1)
        return await original(query)

    fetcher.fetch_async = _blocking_fetch
    svc = MetricsService(fetcher, INSTANCE_ID)

    records = await svc.get_paired("network")

    assert len(started) == 2
    assert records[0]["in"] == "1.00"


@pytest.mark.asyncio
async def test_overview_propagates_failure(fetcher):
    fetcher.fail_on = {"NetworkOut"}
    svc = MetricsService(fetcher, INSTANCE_ID)

    with pytest.raises(BackendQueryError):
        await svc.get_overview()


@pytest.mark.asyncio
async def test_disk_debug_ignores_other_instances(fetcher):
    fetcher.listed = [
        {"Dimensions": [{"Name": "InstanceId", "Value": "i-other"}]},
        {"Dimensions": []},
    ]
    svc = MetricsService(fetcher, INSTANCE_ID)

    result = await svc.get_disk_debug()

    assert result == {"totalMetrics": 2, "instanceMetrics": 0, "metrics": []}
