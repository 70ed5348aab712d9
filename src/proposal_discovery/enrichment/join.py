"""Left join of proposal representations onto the quality index."""

from __future__ import annotations

from collections.abc import Iterable

from proposal_discovery.enrichment.keys import proposal_key
from proposal_discovery.models.domain import (
    NO_MATCH,
    NOT_REQUESTED,
    EnrichedProposal,
    MetricsMatch,
    ProposalRepresentation,
    QualityIndex,
)


def enrich(
    representations: Iterable[ProposalRepresentation],
    index: QualityIndex | None,
) -> list[EnrichedProposal]:
    """Attach metrics to each representation, preserving order and length.

    ``index is None`` means enrichment was not requested (or degraded) and
    every proposal passes through with no metrics. Otherwise unmatched
    proposals are marked as such so they serialize to an empty object.
    """
    if index is None:
        return [EnrichedProposal(representation=r, metrics=NOT_REQUESTED) for r in representations]

    enriched = []
    for rep in representations:
        key = proposal_key(rep)
        if key in index:
            enriched.append(EnrichedProposal(representation=rep, metrics=MetricsMatch(index[key])))
        else:
            enriched.append(EnrichedProposal(representation=rep, metrics=NO_MATCH))
    return enriched


def count_matched(proposals: Iterable[EnrichedProposal]) -> int:
    return sum(1 for p in proposals if isinstance(p.metrics, MetricsMatch))
