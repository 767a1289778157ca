"""Shared utilities and components for the dashboard and alerter services."""

from .config import BaseAwsConfig, BaseLoggingConfig, BaseServiceConfig
from .constants import AlertSubjects, Environment, Namespaces, Statistics

__all__ = [
    "AlertSubjects",
    "Environment",
    "Namespaces",
    "Statistics",
    "BaseServiceConfig",
    "BaseLoggingConfig",
    "BaseAwsConfig",
]
