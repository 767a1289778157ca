from typing import Any

from pydantic import BaseModel, Field


class AlertRequest(BaseModel):
    # left untyped so a non-string message gets the 400 body, not a 422
    message: Any = Field(
        None, description="Notification text; must contain non-whitespace"
    )


class AlertResponse(BaseModel):
    success: bool = True
