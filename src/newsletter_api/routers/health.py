"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.datetime import utc_now
from newsletter_api.config import APIConfig
from newsletter_api.dependencies import get_app_config
from newsletter_api.models.health import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(config: Annotated[APIConfig, Depends(get_app_config)]):
    """Liveness check. Never touches the store."""
    return HealthResponse(
        status="healthy",
        timestamp=utc_now().isoformat(),
        version=config.version,
    )
