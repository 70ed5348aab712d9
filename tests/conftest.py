"""Shared test fixtures."""

from __future__ import annotations

import json

import pytest

from proposal_discovery.config.settings import Settings
from proposal_discovery.enrichment.quality_index import JsonQualityRecordDecoder
from proposal_discovery.exceptions import QualitySourceError, SourceUnavailable
from proposal_discovery.models.domain import (
    Location,
    QualityRecord,
    ServiceDefinition,
    ServiceProposal,
)
from proposal_discovery.pipeline.proposal_pipeline import ProposalPipeline


def make_proposal(
    id: int = 5,
    provider_id: str = "0xP1",
    service_type: str = "openvpn",
    asn: str = "AS1",
    country: str = "NL",
    city: str = "Amsterdam",
) -> ServiceProposal:
    return ServiceProposal(
        id=id,
        provider_id=provider_id,
        service_type=service_type,
        service_definition=ServiceDefinition(
            location_originate=Location(asn=asn, country=country, city=city)
        ),
    )


def make_record(provider_id: str, service_type: str, **metrics) -> QualityRecord:
    entry = {"proposalId": {"providerId": provider_id, "serviceType": service_type}, **metrics}
    return QualityRecord(raw=json.dumps(entry).encode())


class FakeProposalSource:
    """Returns canned proposals and records the filters it was called with."""

    def __init__(self, proposals=None, error: Exception | None = None) -> None:
        self.proposals = proposals or []
        self.error = error
        self.calls: list[str | None] = []

    async def find_proposals(self, provider_id=None, timeout=None):
        self.calls.append(provider_id)
        if self.error is not None:
            raise self.error
        return [p for p in self.proposals if provider_id is None or p.provider_id == provider_id]


class FakeQualitySource:
    def __init__(self, records=None, error: Exception | None = None) -> None:
        self.records = records or []
        self.error = error
        self.calls = 0

    async def fetch_all(self, timeout=None):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def settings():
    """Test settings pointing at unroutable sources."""
    return Settings(
        registry_url="http://registry.test/v1",
        quality_oracle_url="http://oracle.test/api/v1",
        request_budget_seconds=5.0,
        log_json=False,
    )


@pytest.fixture
def sample_proposal():
    return make_proposal()


@pytest.fixture
def build_pipeline(settings):
    def _build(proposal_source, quality_source=None, decoder=None):
        return ProposalPipeline(
            proposal_source=proposal_source,
            quality_source=quality_source or FakeQualitySource(),
            decoder=decoder or JsonQualityRecordDecoder(),
            settings=settings,
        )

    return _build


@pytest.fixture
def failing_registry():
    return FakeProposalSource(error=SourceUnavailable("Proposal registry returned HTTP 503"))


@pytest.fixture
def failing_oracle():
    return FakeQualitySource(error=QualitySourceError("Quality oracle request failed"))
