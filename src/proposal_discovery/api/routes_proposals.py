"""Proposal listing endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from proposal_discovery.api.dependencies import get_proposal_pipeline
from proposal_discovery.exceptions import SourceUnavailable
from proposal_discovery.models.schemas import ProposalsListResponse
from proposal_discovery.pipeline.proposal_pipeline import ProposalPipeline

router = APIRouter()


@router.get("/proposals", response_model=ProposalsListResponse)
async def list_proposals(
    provider_id: str | None = Query(default=None, alias="providerId"),
    fetch_connect_counts: str | None = Query(
        default=None,
        alias="fetchConnectCounts",
        description='Attach quality metrics only when exactly "true"',
    ),
    pipeline: ProposalPipeline = Depends(get_proposal_pipeline),
) -> ProposalsListResponse:
    """Return proposals, optionally filtered by provider.

    With ``fetchConnectCounts=true`` each proposal carries a ``metrics``
    object: the quality oracle entry for it, or ``{}`` when there is none.
    Any other value lists proposals without metrics.
    """
    try:
        proposals = await pipeline.list_proposals(
            provider_id, enrich_metrics=fetch_connect_counts == "true"
        )
    except SourceUnavailable as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ProposalsListResponse.from_enriched(proposals)
