"""Response body for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field

SERVICE_MESSAGE = "Book Inventory API is running"


class HealthResponse(BaseModel):
    """Liveness of the API process plus whether the book store answers."""

    status: Literal["ok"] = "ok"
    message: str = SERVICE_MESSAGE
    environment: str = Field(description="APP_ENV the process was started with")
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a SELECT 1 against the book store"
    )
