import time
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from shared.errors import BackendQueryError
from shared.logging.logger import get_logger
from shared.metrics import get_counter, get_histogram
from shared.telemetry.models import MetricQuery, Sample
from shared.utils.concurrency import run_blocking

CLOUDWATCH_QUERIES = get_counter(
    "cloudwatch_queries_total",
    "CloudWatch read calls issued",
    labelnames=("operation",),
)
CLOUDWATCH_ERRORS = get_counter(
    "cloudwatch_query_errors_total",
    "CloudWatch read calls that failed",
    labelnames=("operation",),
)
CLOUDWATCH_LATENCY = get_histogram(
    "cloudwatch_query_latency_seconds",
    "CloudWatch read call latency",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
    labelnames=("operation",),
)

DEFAULT_PERIOD_SECONDS = 60

logger = get_logger("telemetry.fetcher")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MetricFetcher:
    """Reads datapoints from CloudWatch and normalizes them into Samples.

    The CloudWatch client is injected; one fetcher is built per process with
    the sampling period it needs (60s for the dashboard, 300s for the
    scheduled CPU check). Backend errors are not retried.
    """

    def __init__(
        self,
        client: Any,
        period_seconds: int = DEFAULT_PERIOD_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.client = client
        self.period_seconds = period_seconds
        self._clock = clock

    def build_params(self, query: MetricQuery) -> dict[str, Any]:
        end_time = self._clock()
        start_time = end_time - timedelta(minutes=query.lookback_minutes)
        params: dict[str, Any] = {
            "Namespace": query.namespace,
            "MetricName": query.metric_name,
            "Dimensions": [d.to_cloudwatch() for d in query.dimensions],
            "StartTime": start_time,
            "EndTime": end_time,
            "Period": self.period_seconds,
            "Statistics": [query.statistic],
        }
        if query.unit:
            params["Unit"] = query.unit
        return params

    def fetch(self, query: MetricQuery) -> list[Sample]:
        """Return the query's samples sorted ascending by timestamp."""
        params = self.build_params(query)
        logger.debug(
            "cloudwatch_get_metric_statistics",
            extra={
                "namespace": query.namespace,
                "metric_name": query.metric_name,
                "dimensions": params["Dimensions"],
                "statistic": query.statistic,
                "unit": query.unit,
                "period": self.period_seconds,
                "lookback_minutes": query.lookback_minutes,
            },
        )

        response = self._call(
            "get_metric_statistics",
            query.metric_name,
            lambda: self.client.get_metric_statistics(**params),
        )
        datapoints = response.get("Datapoints", [])
        logger.info(
            "cloudwatch_datapoints_received",
            extra={"metric_name": query.metric_name, "count": len(datapoints)},
        )

        try:
            return [
                Sample(time=dp["Timestamp"], value=dp[query.statistic])
                for dp in sorted(datapoints, key=lambda dp: dp["Timestamp"])
            ]
        except KeyError as e:
            raise self._malformed(
                query, f"Datapoint missing field {e.args[0]!r}"
            ) from e
        except (TypeError, ValidationError) as e:
            raise self._malformed(query, f"Malformed datapoint: {e}") from e

    def _malformed(self, query: MetricQuery, message: str) -> BackendQueryError:
        CLOUDWATCH_ERRORS.labels(operation="get_metric_statistics").inc()
        logger.error(
            "cloudwatch_datapoint_malformed",
            extra={"metric_name": query.metric_name, "error": message},
        )
        return BackendQueryError(
            message,
            operation="get_metric_statistics",
            metric_name=query.metric_name,
        )

    async def fetch_async(self, query: MetricQuery) -> list[Sample]:
        return await run_blocking(self.fetch, query)

    def list_metrics(self, namespace: str, metric_name: str) -> list[dict[str, Any]]:
        """Every series CloudWatch knows under a metric name, across all pages."""

        def _list() -> list[dict[str, Any]]:
            paginator = self.client.get_paginator("list_metrics")
            metrics: list[dict[str, Any]] = []
            for page in paginator.paginate(Namespace=namespace, MetricName=metric_name):
                metrics.extend(page.get("Metrics", []))
            return metrics

        metrics = self._call("list_metrics", metric_name, _list)
        logger.info(
            "cloudwatch_metrics_listed",
            extra={
                "namespace": namespace,
                "metric_name": metric_name,
                "count": len(metrics),
            },
        )
        return metrics

    async def list_metrics_async(
        self, namespace: str, metric_name: str
    ) -> list[dict[str, Any]]:
        return await run_blocking(self.list_metrics, namespace, metric_name)

    def _call(self, operation: str, metric_name: str, func: Callable[[], Any]) -> Any:
        CLOUDWATCH_QUERIES.labels(operation=operation).inc()
        start = time.perf_counter()
        try:
            return func()
        except (ClientError, BotoCoreError) as e:
            CLOUDWATCH_ERRORS.labels(operation=operation).inc()
            logger.error(
                "cloudwatch_query_failed",
                extra={
                    "operation": operation,
                    "metric_name": metric_name,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            raise BackendQueryError(
                str(e), operation=operation, metric_name=metric_name
            ) from e
        finally:
            CLOUDWATCH_LATENCY.labels(operation=operation).observe(
                time.perf_counter() - start
            )
