from dashboard_api.core.config import settings
from dashboard_api.core.logger import configure_logging, get_logger
from shared.aws import create_cloudwatch_client, create_sns_client
from shared.notifications import AlertPublisher
from shared.telemetry import MetricFetcher

logger = get_logger("startup")


def initialize_application(state) -> None:
    """Configure logging and build the AWS-backed collaborators once.

    The fetcher and publisher are stored on ``state`` (the FastAPI app
    state) and handed to request handlers through dependencies.
    """
    configure_logging()
    logger.info("initializing_application")
    if not settings.instance_id:
        logger.warning("instance_id_not_configured")

    state.fetcher = MetricFetcher(
        create_cloudwatch_client(settings),
        period_seconds=settings.metric_period_seconds,
    )
    state.publisher = AlertPublisher(create_sns_client(settings), settings.sns_topic_arn)
    logger.info(
        "application_initialized",
        extra={
            "aws_region": settings.aws_region,
            "instance_id": settings.instance_id,
            "otel_service": settings.otel_service_name,
        },
    )
