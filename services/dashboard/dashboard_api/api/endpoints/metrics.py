from typing import Any, Callable

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from dashboard_api.api.dependencies import get_metrics_service
from dashboard_api.core.logger import get_logger
from dashboard_api.metrics.catalog import PAIRED_ENDPOINTS, SERIES_ENDPOINTS
from dashboard_api.schemas.series import DiskDebugResponse, ErrorResponse, SeriesPoint
from dashboard_api.services.metrics_service import MetricsService

router = APIRouter(prefix="/metrics", tags=["metrics"])
logger = get_logger("api.metrics")

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}
}


def _failure_response(
    endpoint: str, error_message: str, exc: Exception, include_details: bool = False
) -> JSONResponse:
    logger.exception(
        "metric_endpoint_failed",
        extra={
            "endpoint": endpoint,
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )
    body = {"error": error_message}
    if include_details:
        body["details"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)


@router.get(
    "/disk/debug",
    response_model=DiskDebugResponse,
    responses=_ERROR_RESPONSES,
    summary="List disk usage series known for the monitored instance",
)
async def disk_debug(svc: MetricsService = Depends(get_metrics_service)):
    try:
        return await svc.get_disk_debug()
    except Exception as e:
        return _failure_response("disk/debug", "Debug failed", e)


@router.get(
    "/overview",
    responses=_ERROR_RESPONSES,
    summary="CPU, memory, disk, disk I/O and network series in one call",
)
async def overview(svc: MetricsService = Depends(get_metrics_service)):
    try:
        return await svc.get_overview()
    except Exception as e:
        return _failure_response("overview", "Failed to fetch dashboard metrics", e)


def _series_handler(name: str) -> Callable:
    entry = SERIES_ENDPOINTS[name]

    async def handler(svc: MetricsService = Depends(get_metrics_service)):
        try:
            return await svc.get_series(name)
        except Exception as e:
            return _failure_response(name, entry.error_message, e, entry.include_details)

    handler.__name__ = f"get_{name.replace('/', '_')}"
    return handler


def _paired_handler(name: str) -> Callable:
    entry = PAIRED_ENDPOINTS[name]

    async def handler(svc: MetricsService = Depends(get_metrics_service)):
        try:
            return await svc.get_paired(name)
        except Exception as e:
            return _failure_response(name, entry.error_message, e, entry.include_details)

    handler.__name__ = f"get_{name.replace('/', '_')}"
    return handler


for _name in SERIES_ENDPOINTS:
    router.add_api_route(
        f"/{_name}",
        _series_handler(_name),
        methods=["GET"],
        response_model=list[SeriesPoint],
        responses=_ERROR_RESPONSES,
    )

for _name, _entry in PAIRED_ENDPOINTS.items():
    router.add_api_route(
        f"/{_name}",
        _paired_handler(_name),
        methods=["GET"],
        responses=_ERROR_RESPONSES,
        summary=f"{_entry.labels[0]}/{_entry.labels[1]} series paired by timestamp",
    )
