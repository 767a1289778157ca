from shared.config import BaseServiceConfig


class Settings(BaseServiceConfig):
    # HTTP
    host: str = "0.0.0.0"
    port: int = 4000
    cors_allow_origins: list[str] = ["*"]

    # CloudWatch sampling period for dashboard series
    metric_period_seconds: int = 60

    otel_service_name: str = "dashboard"


settings = Settings()
