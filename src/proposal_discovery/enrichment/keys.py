"""Join key shared by proposals and quality records."""

from __future__ import annotations

from typing import Protocol

from proposal_discovery.models.domain import ProposalKey


class Keyed(Protocol):
    @property
    def provider_id(self) -> str: ...

    @property
    def service_type(self) -> str: ...


def proposal_key(value: Keyed) -> ProposalKey:
    """Key on (provider_id, service_type).

    Kept as a tuple rather than a joined string, so a provider id or service
    type containing the separator cannot collide with another pair.
    """
    return ProposalKey(value.provider_id, value.service_type)
