"""Map registry proposals to their public representation."""

from __future__ import annotations

from collections.abc import Iterable

from proposal_discovery.models.domain import ProposalRepresentation, ServiceProposal


def to_representation(proposal: ServiceProposal) -> ProposalRepresentation:
    location = proposal.service_definition.location_originate
    return ProposalRepresentation(
        id=proposal.id,
        provider_id=proposal.provider_id,
        service_type=proposal.service_type,
        asn=location.asn,
        country=location.country,
        city=location.city,
    )


def map_proposals(proposals: Iterable[ServiceProposal]) -> list[ProposalRepresentation]:
    """Return representations in the same order as ``proposals``."""
    return [to_representation(p) for p in proposals]
