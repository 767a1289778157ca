"""boto3 client construction.

Clients are built once per process (FastAPI lifespan, alerter handler) and
passed explicitly into the fetcher and publisher.
"""

from __future__ import annotations

import boto3
from botocore.config import Config

from shared.config import BaseAwsConfig


def _client_config(config: BaseAwsConfig) -> Config:
    # A single attempt: backend failures surface to the caller unretried.
    return Config(
        connect_timeout=config.aws_connect_timeout_seconds,
        read_timeout=config.aws_read_timeout_seconds,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )


def create_cloudwatch_client(config: BaseAwsConfig):
    return boto3.client(
        "cloudwatch", config=_client_config(config), **config.to_boto3_kwargs()
    )


def create_sns_client(config: BaseAwsConfig):
    return boto3.client("sns", config=_client_config(config), **config.to_boto3_kwargs())
