"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Request

from proposal_discovery.config.settings import Settings
from proposal_discovery.pipeline.proposal_pipeline import ProposalPipeline


def get_proposal_pipeline(request: Request) -> ProposalPipeline:
    return request.app.state.proposal_pipeline


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
