"""Hourly CPU utilization threshold check."""

from __future__ import annotations

from dataclasses import dataclass

from shared.constants import CPU_THRESHOLD_PERCENT, AlertSubjects, Namespaces, Statistics
from shared.logging.logger import get_logger
from shared.notifications import AlertPublisher
from shared.telemetry import Dimension, MetricFetcher, MetricQuery

logger = get_logger("cpu_alerter.check")


@dataclass(frozen=True)
class CheckResult:
    average: float | None
    threshold: float
    breached: bool = False
    message_id: str | None = None


class CpuThresholdCheck:
    """Average CPUUtilization over the lookback window against a threshold.

    Publishes one notification per run whose mean exceeds the threshold.
    Runs are stateless; two breaching runs publish twice.
    """

    def __init__(
        self,
        fetcher: MetricFetcher,
        publisher: AlertPublisher,
        instance_id: str,
        threshold: float = CPU_THRESHOLD_PERCENT,
        lookback_minutes: int = 60,
    ):
        self.fetcher = fetcher
        self.publisher = publisher
        self.instance_id = instance_id
        self.threshold = threshold
        self.lookback_minutes = lookback_minutes

    def query(self) -> MetricQuery:
        return MetricQuery(
            metric_name="CPUUtilization",
            namespace=Namespaces.EC2,
            lookback_minutes=self.lookback_minutes,
            statistic=Statistics.AVERAGE,
            dimensions=(Dimension(name="InstanceId", value=self.instance_id),),
        )

    def run(self) -> CheckResult:
        samples = self.fetcher.fetch(self.query())
        if not samples:
            logger.info("No data points found.")
            return CheckResult(average=None, threshold=self.threshold)

        average = sum(s.value for s in samples) / len(samples)
        logger.info(
            f"Average CPU Utilization over last hour: {average:.2f}%",
            extra={"average_cpu": average, "datapoints": len(samples)},
        )

        if average <= self.threshold:
            logger.info("CPU utilization is normal.")
            return CheckResult(average=average, threshold=self.threshold)

        message = (
            f"Alert! CPU Utilization is high on instance {self.instance_id}: "
            f"{average:.2f}%"
        )
        message_id = self.publisher.publish(message, subject=AlertSubjects.CPU_THRESHOLD)
        logger.info("Alert sent.", extra={"message_id": message_id})
        return CheckResult(
            average=average,
            threshold=self.threshold,
            breached=True,
            message_id=message_id,
        )
