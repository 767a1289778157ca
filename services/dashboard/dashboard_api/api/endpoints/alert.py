from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from dashboard_api.api.dependencies import get_publisher
from dashboard_api.core.logger import get_logger
from dashboard_api.schemas.alert import AlertRequest, AlertResponse
from dashboard_api.schemas.series import ErrorResponse
from shared.errors import AlertValidationError, PublishError
from shared.notifications import AlertPublisher

router = APIRouter(tags=["alerts"])


@router.post(
    "/alert",
    response_model=AlertResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    summary="Send a manual notification to the alert topic",
)
async def send_alert(
    payload: AlertRequest | None = None,
    publisher: AlertPublisher = Depends(get_publisher),
):
    logger = get_logger("api.alert")
    try:
        message_id = await publisher.publish_async(payload.message if payload else None)
    except AlertValidationError as e:
        logger.info("alert_rejected", extra={"reason": str(e)})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(e)}
        )
    except PublishError as e:
        logger.error(
            "alert_send_failed",
            extra={"error_type": type(e).__name__, "error": str(e)},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to send alert"},
        )

    logger.info("alert_sent", extra={"message_id": message_id})
    return AlertResponse(success=True)
