from enum import Enum


class Environment(str, Enum):
    """Deployment stage, stamped on every log record."""

    PRODUCTION = "production"
    STAGING = "staging"
    TESTING = "testing"
    DEVELOPMENT = "development"

    @classmethod
    def is_development(cls, env: str) -> bool:
        """Local runs get uvicorn's auto-reload."""
        return env.strip().lower() == cls.DEVELOPMENT.value
