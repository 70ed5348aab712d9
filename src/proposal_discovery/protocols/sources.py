"""Protocols for the proposal registry and the quality oracle."""

from __future__ import annotations

from typing import Protocol

from proposal_discovery.models.domain import DecodedQualityRecord, QualityRecord, ServiceProposal


class ProposalSource(Protocol):
    async def find_proposals(
        self, provider_id: str | None = None, timeout: float | None = None
    ) -> list[ServiceProposal]: ...


class QualitySource(Protocol):
    async def fetch_all(self, timeout: float | None = None) -> list[QualityRecord]: ...


class QualityRecordDecoder(Protocol):
    def decode(self, record: QualityRecord) -> DecodedQualityRecord: ...
