"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    store_configured: bool
    storage_configured: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status, with which collaborators have settings
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        store_configured=settings.store.is_configured,
        storage_configured=settings.storage.is_configured,
    )
