import uvicorn

from dashboard_api.core.config import settings
from dashboard_api.core.logger import configure_logging, get_logger
from shared.constants import Environment


def main() -> None:
    configure_logging()
    get_logger("dashboard").info(
        "dashboard_listening", extra={"host": settings.host, "port": settings.port}
    )
    uvicorn.run(
        "dashboard_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=Environment.is_development(settings.app_environment),
    )


if __name__ == "__main__":
    main()
