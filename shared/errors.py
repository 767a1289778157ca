"""Error kinds raised by the shared telemetry and notification layers."""

from __future__ import annotations


class TelemetryError(Exception):
    """Base class for failures talking to the metrics backend or the
    notification channel."""


class BackendQueryError(TelemetryError):
    """CloudWatch was unreachable, throttled, denied the call, or returned a
    response that could not be read."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        metric_name: str | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.metric_name = metric_name


class PublishError(TelemetryError):
    """The notification topic rejected or failed to accept a message."""

    def __init__(self, message: str, topic_arn: str | None = None):
        super().__init__(message)
        self.topic_arn = topic_arn


class AlertValidationError(ValueError):
    """An alert message was missing, empty or whitespace only."""


__all__ = [
    "TelemetryError",
    "BackendQueryError",
    "PublishError",
    "AlertValidationError",
]
