"""Entry point for the scheduled trigger (Lambda-style ``handler``)."""

from cpu_alerter.check import CpuThresholdCheck
from cpu_alerter.core.config import settings
from shared.aws import create_cloudwatch_client, create_sns_client
from shared.constants import AlertSubjects
from shared.errors import TelemetryError
from shared.logging.json import configure_logging
from shared.logging.logger import get_logger
from shared.notifications import AlertPublisher
from shared.telemetry import MetricFetcher

logger = get_logger("cpu_alerter.handler")


def build_check() -> CpuThresholdCheck:
    fetcher = MetricFetcher(
        create_cloudwatch_client(settings),
        period_seconds=settings.alert_period_seconds,
    )
    publisher = AlertPublisher(
        create_sns_client(settings),
        settings.sns_topic_arn,
        default_subject=AlertSubjects.CPU_THRESHOLD,
    )
    return CpuThresholdCheck(
        fetcher,
        publisher,
        settings.instance_id,
        lookback_minutes=settings.alert_lookback_minutes,
    )


def handler(event=None, context=None) -> dict:
    """Run one check. Failures are logged and never raised to the trigger."""
    configure_logging(
        service=settings.otel_service_name,
        environment=settings.app_environment,
        level=settings.app_log_level,
        redaction_patterns=settings.app_log_redaction_patterns,
    )
    try:
        result = build_check().run()
    except TelemetryError:
        logger.exception("Error fetching metrics or sending alert")
        return {"status": "error"}
    except Exception:
        logger.exception("Unexpected error running CPU check")
        return {"status": "error"}

    if result.average is None:
        return {"status": "no_data"}
    return {
        "status": "alerted" if result.breached else "ok",
        "average": round(result.average, 2),
    }
