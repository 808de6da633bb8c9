"""GET /health: unauthenticated liveness check for the inventory API."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from book_inventory.api.deps import get_app_settings
from book_inventory.core.config import Settings
from book_inventory.core.database import check_db_connected, get_db
from book_inventory.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    # Always 200 while the process is up; a dead store shows up in the body only.
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
