"""Shared configuration base classes.

Provides common configuration patterns used across all services to reduce
duplication and ensure consistency.
"""

from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class BaseLoggingConfig(BaseSettings):
    """Common logging configuration for all services."""

    app_log_level: str = "INFO"
    app_log_redaction_patterns: list[str] = [
        "password",
        "token",
        "secret",
        "authorization",
        "cookie",
        "credential",
    ]
    app_environment: str = "production"


class BaseAwsConfig(BaseSettings):
    """Common AWS configuration for all services.

    The region is read from AWS_REGION, or APP_REGION for the scheduled job
    which runs where AWS_REGION is reserved by the runtime.
    """

    aws_region: str = Field(
        "us-east-1", validation_alias=AliasChoices("aws_region", "app_region")
    )
    aws_endpoint_url: str | None = None  # LocalStack / testing
    aws_connect_timeout_seconds: float = 5.0
    aws_read_timeout_seconds: float = 10.0

    # Monitored resource and notification channel
    instance_id: str = ""
    sns_topic_arn: str = ""

    def to_boto3_kwargs(self) -> dict[str, Any]:
        """Build kwargs suitable for boto3 client creation."""
        kwargs: dict[str, Any] = {"region_name": self.aws_region}
        if self.aws_endpoint_url:
            kwargs["endpoint_url"] = self.aws_endpoint_url
        return kwargs


class BaseServiceConfig(BaseLoggingConfig, BaseAwsConfig):
    """Base configuration combining logging and AWS settings.

    Services should inherit from this and add their own specific settings.
    The otel_service_name should be overridden by each service.
    """

    otel_service_name: str = "unknown"  # Should be overridden by service


__all__ = ["BaseLoggingConfig", "BaseAwsConfig", "BaseServiceConfig"]
