"""Tests for wire schemas."""

import pytest
from conftest import make_proposal
from pydantic import ValidationError

from proposal_discovery.enrichment.join import enrich
from proposal_discovery.enrichment.representation import map_proposals
from proposal_discovery.models.domain import EnrichedProposal, Location, MetricsMatch, ProposalKey
from proposal_discovery.models.schemas import (
    HealthResponse,
    ProposalsListResponse,
    RegistryProposal,
    RegistryProposalsEnvelope,
)


def _listing(proposals, index):
    return ProposalsListResponse.from_enriched(enrich(map_proposals(proposals), index)).to_wire()


def test_metrics_omitted_when_not_requested():
    wire = _listing([make_proposal()], None)
    assert "metrics" not in wire["proposals"][0]


def test_metrics_empty_object_when_unmatched():
    wire = _listing([make_proposal()], {})
    assert wire["proposals"][0]["metrics"] == {}


def test_metrics_payload_when_matched():
    payload = {"connectCount": {"success": 1, "fail": 0, "timeout": 0}}
    wire = _listing([make_proposal()], {ProposalKey("0xP1", "openvpn"): payload})
    assert wire["proposals"][0]["metrics"] == payload


def test_empty_country_and_city_omitted_asn_kept():
    wire = _listing([make_proposal(asn="", country="", city="")], None)
    assert wire["proposals"][0]["serviceDefinition"] == {"locationOriginate": {"asn": ""}}


def test_id_zero_is_kept():
    wire = _listing([make_proposal(id=0)], None)
    assert wire["proposals"][0]["id"] == 0


def test_empty_listing():
    assert ProposalsListResponse.from_enriched([]).to_wire() == {"proposals": []}


def test_registry_envelope_parses_wire_proposal():
    envelope = RegistryProposalsEnvelope.model_validate(
        {
            "proposals": [
                {
                    "id": 5,
                    "providerId": "0xP1",
                    "serviceType": "openvpn",
                    "serviceDefinition": {"locationOriginate": {"asn": "AS1", "country": "NL"}},
                }
            ]
        }
    )
    proposal = envelope.proposals[0].to_domain()
    assert proposal == make_proposal(city="")


def test_registry_proposal_requires_provider():
    with pytest.raises(ValidationError):
        RegistryProposal.model_validate(
            {"id": 1, "serviceType": "openvpn", "serviceDefinition": {"locationOriginate": {"asn": ""}}}
        )


def test_health_response():
    resp = HealthResponse(status="ok", registry_url="http://r", quality_oracle_url="http://q")
    assert resp.status == "ok"


def test_registry_proposal_ignores_metrics_field():
    proposal = RegistryProposal.model_validate(
        {"id": 1, "providerId": "0xP1", "serviceType": "openvpn", "metrics": {"latency": 1}}
    )
    assert not hasattr(proposal, "metrics")


def test_registry_proposal_without_service_definition():
    proposal = RegistryProposal.model_validate(
        {"id": 1, "providerId": "0xP1", "serviceType": "openvpn", "serviceDefinition": None}
    ).to_domain()
    assert proposal.service_definition.location_originate == Location()


def test_null_metrics_payload_is_still_emitted():
    enriched = EnrichedProposal(
        representation=map_proposals([make_proposal()])[0], metrics=MetricsMatch(None)
    )
    wire = ProposalsListResponse.from_enriched([enriched]).to_wire()
    assert "metrics" in wire["proposals"][0]
    assert wire["proposals"][0]["metrics"] is None


def test_proposal_schema_documents_fields():
    schema = ProposalsListResponse.model_json_schema(by_alias=True)
    proposal = schema["$defs"]["ProposalSchema"]["properties"]
    assert proposal["serviceType"]["examples"] == ["openvpn"]
    location = schema["$defs"]["LocationSchema"]["properties"]
    assert location["asn"]["examples"] == ["AS00001"]
