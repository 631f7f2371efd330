"""Liveness endpoint for load balancers and deploy checks."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from hub.config import Settings
from hub.util.observability import service_version

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    environment: str
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests. Does not touch the database."""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        version=service_version(),
        git_sha=settings.git_sha,
    )
