"""Metric recording helpers for proposal listings."""

from __future__ import annotations

from proposal_discovery.observability.logger import get_logger

logger = get_logger("metrics")


def log_enrichment_degraded(trace_id: str, reason: str, error: str | None = None) -> None:
    logger.warning(
        "enrichment_degraded",
        trace_id=trace_id,
        reason=reason,
        error=error,
    )


def log_listing_metrics(
    trace_id: str,
    provider_id: str | None,
    enrichment: str,
    proposals: int,
    matched: int,
) -> None:
    logger.info(
        "listing_metrics",
        trace_id=trace_id,
        provider_id=provider_id,
        enrichment=enrichment,
        proposals=proposals,
        matched=matched,
    )


def log_latency(trace_id: str, stages: dict[str, float], total_ms: float) -> None:
    logger.info(
        "latency",
        trace_id=trace_id,
        stages=stages,
        total_ms=round(total_ms, 2),
    )
