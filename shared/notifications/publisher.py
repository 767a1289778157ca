from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from shared.constants import AlertSubjects
from shared.errors import AlertValidationError, PublishError
from shared.logging.logger import get_logger
from shared.metrics import get_counter
from shared.utils.concurrency import run_blocking

ALERTS_PUBLISHED = get_counter(
    "alerts_published_total", "Alerts accepted by the notification topic"
)
ALERT_PUBLISH_ERRORS = get_counter(
    "alert_publish_errors_total", "Alerts the notification topic failed to accept"
)

logger = get_logger("notifications.publisher")


def validate_message(message: Any) -> str:
    """Return the message unchanged, or raise unless it is non-blank text."""
    if not isinstance(message, str) or not message.strip():
        raise AlertValidationError("Message required")
    return message


class AlertPublisher:
    """Forwards alert messages to an SNS topic.

    Shared by the manual alert endpoint and the scheduled CPU check. Every
    call that passes validation results in exactly one publish attempt.
    """

    def __init__(
        self,
        client: Any,
        topic_arn: str,
        default_subject: str = AlertSubjects.MANUAL,
    ):
        self.client = client
        self.topic_arn = topic_arn
        self.default_subject = default_subject

    def publish(self, message: str | None, subject: str | None = None) -> str | None:
        """Publish ``message`` and return the SNS message id."""
        message = validate_message(message)
        subject = subject or self.default_subject

        try:
            response = self.client.publish(
                TopicArn=self.topic_arn,
                Message=message,
                Subject=subject,
            )
        except (ClientError, BotoCoreError) as e:
            ALERT_PUBLISH_ERRORS.inc()
            logger.error(
                "alert_publish_failed",
                extra={
                    "topic_arn": self.topic_arn,
                    "subject": subject,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            raise PublishError(str(e), topic_arn=self.topic_arn) from e

        ALERTS_PUBLISHED.inc()
        message_id = response.get("MessageId")
        logger.info(
            "alert_published",
            extra={"topic_arn": self.topic_arn, "subject": subject, "message_id": message_id},
        )
        return message_id

    async def publish_async(
        self, message: str | None, subject: str | None = None
    ) -> str | None:
        # Validate on the loop so a blank message never reaches a worker thread
        validate_message(message)
        return await run_blocking(self.publish, message, subject)
