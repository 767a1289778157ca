from shared.config import BaseServiceConfig


class Settings(BaseServiceConfig):
    # CPU check window; the threshold itself is fixed in shared.constants
    alert_lookback_minutes: int = 60
    alert_period_seconds: int = 300

    otel_service_name: str = "cpu-alerter"


settings = Settings()
