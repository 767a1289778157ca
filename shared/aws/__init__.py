from .clients import create_cloudwatch_client, create_sns_client

__all__ = ["create_cloudwatch_client", "create_sns_client"]
