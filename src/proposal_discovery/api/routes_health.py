"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from proposal_discovery.api.dependencies import get_settings
from proposal_discovery.config.settings import Settings
from proposal_discovery.models.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        registry_url=settings.registry_url,
        quality_oracle_url=settings.quality_oracle_url,
    )
