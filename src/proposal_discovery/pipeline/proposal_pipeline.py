"""Proposal listing pipeline: fetch, optionally enrich with quality metrics, join."""

from __future__ import annotations

from proposal_discovery.config.settings import Settings
from proposal_discovery.enrichment.join import count_matched, enrich
from proposal_discovery.enrichment.quality_index import build_quality_index
from proposal_discovery.enrichment.representation import map_proposals
from proposal_discovery.exceptions import QualityRecordDecodeError, SourceUnavailable
from proposal_discovery.models.domain import EnrichedProposal, EnrichmentStatus, QualityIndex
from proposal_discovery.observability.metrics import (
    log_enrichment_degraded,
    log_latency,
    log_listing_metrics,
)
from proposal_discovery.observability.tracing import TraceContext
from proposal_discovery.protocols.sources import (
    ProposalSource,
    QualityRecordDecoder,
    QualitySource,
)


class ProposalPipeline:
    def __init__(
        self,
        proposal_source: ProposalSource,
        quality_source: QualitySource,
        decoder: QualityRecordDecoder,
        settings: Settings,
    ) -> None:
        self._proposals = proposal_source
        self._quality = quality_source
        self._decoder = decoder
        self._settings = settings

    async def list_proposals(
        self, provider_id: str | None = None, enrich_metrics: bool = False
    ) -> list[EnrichedProposal]:
        """List proposals, attaching quality metrics when requested.

        Only a registry failure is raised (as SourceUnavailable). Problems
        on the quality side downgrade the response to unenriched output.
        """
        trace = TraceContext(budget_seconds=self._settings.request_budget_seconds)
        provider_id = provider_id or None

        # STEP 1: Proposal registry
        with trace.span("find_proposals"):
            try:
                proposals = await self._proposals.find_proposals(
                    provider_id, timeout=trace.remaining_seconds()
                )
            except SourceUnavailable:
                raise
            except Exception as e:
                raise SourceUnavailable(f"Proposal registry failed: {e!r}") from e

        # STEP 2: Quality index (best effort)
        index: QualityIndex | None = None
        status = EnrichmentStatus.NOT_REQUESTED
        if enrich_metrics:
            with trace.span("quality_index"):
                index, status = await self._load_quality_index(trace)

        # STEP 3-4: Map and join
        with trace.span("join"):
            result = enrich(map_proposals(proposals), index)

        log_listing_metrics(
            trace.trace_id,
            provider_id=provider_id,
            enrichment=status.value,
            proposals=len(result),
            matched=count_matched(result),
        )
        log_latency(trace.trace_id, trace.span_durations(), trace.elapsed_ms)
        return result

    async def _load_quality_index(
        self, trace: TraceContext
    ) -> tuple[QualityIndex | None, EnrichmentStatus]:
        remaining = trace.remaining_seconds()
        if remaining is not None and remaining <= 0:
            log_enrichment_degraded(trace.trace_id, EnrichmentStatus.DEADLINE_EXCEEDED.value)
            return None, EnrichmentStatus.DEADLINE_EXCEEDED

        try:
            records = await self._quality.fetch_all(timeout=remaining)
        except Exception as e:
            log_enrichment_degraded(
                trace.trace_id, EnrichmentStatus.SOURCE_FAILED.value, error=repr(e)
            )
            return None, EnrichmentStatus.SOURCE_FAILED

        try:
            index = build_quality_index(records, self._decoder)
        except QualityRecordDecodeError as e:
            log_enrichment_degraded(
                trace.trace_id, EnrichmentStatus.MALFORMED_RECORD.value, error=str(e)
            )
            return None, EnrichmentStatus.MALFORMED_RECORD

        return index, EnrichmentStatus.APPLIED
