from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from prometheus_fastapi_instrumentator import Instrumentator

from dashboard_api.api.router import api_router
from dashboard_api.core.config import settings
from dashboard_api.core.logger import get_logger
from dashboard_api.startup import initialize_application

logger = get_logger("dashboard.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    initialize_application(app.state)
    try:
        yield
    finally:
        logger.info("dashboard_service_stopping")


app = FastAPI(title="EC2 Telemetry Dashboard API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

instrumentator = Instrumentator(
    should_group_status_codes=True,
    should_ignore_untemplated=True,
    excluded_handlers=["^/docs$", "^/openapi.json$", "^/metrics$", "^/healthz$"],
    inprogress_name="dashboard_inprogress",
    inprogress_labels=True,
)
instrumentator.instrument(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
