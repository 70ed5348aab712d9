"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from proposal_discovery.api.middleware import RequestTimingMiddleware
from proposal_discovery.api.routes_health import router as health_router
from proposal_discovery.api.routes_proposals import router as proposals_router
from proposal_discovery.config.settings import Settings
from proposal_discovery.enrichment.quality_index import JsonQualityRecordDecoder
from proposal_discovery.observability.logger import get_logger, setup_logging
from proposal_discovery.pipeline.proposal_pipeline import ProposalPipeline
from proposal_discovery.sources.quality_oracle_client import QualityOracleClient
from proposal_discovery.sources.registry_client import RegistryClient

logger = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = getattr(app.state, "settings", None) or Settings()
    setup_logging(settings.log_level, settings.log_json)

    # Sources
    registry = RegistryClient(
        base_url=settings.registry_url,
        timeout_seconds=settings.source_timeout_seconds,
    )
    quality_oracle = QualityOracleClient(
        base_url=settings.quality_oracle_url,
        metrics_path=settings.quality_metrics_path,
        timeout_seconds=settings.source_timeout_seconds,
    )

    # Pipeline
    proposal_pipeline = ProposalPipeline(
        proposal_source=registry,
        quality_source=quality_oracle,
        decoder=JsonQualityRecordDecoder(),
        settings=settings,
    )

    # Attach to app state
    app.state.proposal_pipeline = proposal_pipeline
    app.state.settings = settings

    logger.info(
        "startup_complete",
        registry_url=settings.registry_url,
        quality_oracle_url=settings.quality_oracle_url,
    )

    yield

    logger.info("shutdown_complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="Proposal Discovery",
        version="1.0.0",
        description="Service proposal listing with best-effort quality metrics",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_middleware(RequestTimingMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(proposals_router, tags=["proposals"])
    return app
