"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from proposal_discovery.models.domain import (
    EnrichedProposal,
    Location,
    MetricsMatch,
    MetricsNoMatch,
    ServiceDefinition,
    ServiceProposal,
)

EMPTY_METRICS: dict = {}


# Registry input. Missing or null location fields read as empty strings.


class RegistryLocation(BaseModel):
    asn: str = ""
    country: str = ""
    city: str = ""

    @field_validator("asn", "country", "city", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class RegistryServiceDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location_originate: RegistryLocation = Field(
        default_factory=RegistryLocation, alias="locationOriginate"
    )

    @field_validator("location_originate", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any) -> Any:
        return {} if value is None else value


class RegistryProposal(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    provider_id: str = Field(alias="providerId")
    service_type: str = Field(alias="serviceType")
    service_definition: RegistryServiceDefinition = Field(
        default_factory=RegistryServiceDefinition, alias="serviceDefinition"
    )

    @field_validator("service_definition", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_domain(self) -> ServiceProposal:
        loc = self.service_definition.location_originate
        return ServiceProposal(
            id=self.id,
            provider_id=self.provider_id,
            service_type=self.service_type,
            service_definition=ServiceDefinition(
                location_originate=Location(asn=loc.asn, country=loc.country, city=loc.city)
            ),
        )


class RegistryProposalsEnvelope(BaseModel):
    proposals: list[RegistryProposal] = Field(default_factory=list)


# API output


class LocationSchema(BaseModel):
    asn: str = Field(description="Autonomous System Number", examples=["AS00001"])
    country: str = Field(default="", description="Omitted when unknown", examples=["NL"])
    city: str = Field(default="", description="Omitted when unknown", examples=["Amsterdam"])

    @model_serializer(mode="wrap")
    def _omit_empty_place(self, handler):
        data = handler(self)
        for name in ("country", "city"):
            if not data.get(name):
                data.pop(name, None)
        return data


class ServiceDefinitionSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location_originate: LocationSchema = Field(alias="locationOriginate")


class ProposalSchema(BaseModel):
    """Proposal as returned to API clients.

    ``metrics`` is only serialized when it was explicitly set, i.e. when
    enrichment was requested; any value, null included, is then emitted.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Per provider unique serial number of the proposal", examples=[5])
    provider_id: str = Field(
        alias="providerId",
        description="Provider who offers the service",
        examples=["0x0000000000000000000000000000000000000001"],
    )
    service_type: str = Field(
        alias="serviceType", description="Type of service the provider offers", examples=["openvpn"]
    )
    service_definition: ServiceDefinitionSchema = Field(
        alias="serviceDefinition", description="Qualitative service definition"
    )
    metrics: Any = Field(
        default=None,
        description="Quality oracle entry; {} when requested but unknown, absent when not requested",
        examples=[{"connectCount": {"success": 10, "fail": 1, "timeout": 0}}],
    )

    @model_serializer(mode="wrap")
    def _omit_unrequested_metrics(self, handler):
        data = handler(self)
        if "metrics" not in self.model_fields_set:
            data.pop("metrics", None)
        return data

    @classmethod
    def from_enriched(cls, proposal: EnrichedProposal) -> ProposalSchema:
        rep = proposal.representation
        fields: dict[str, Any] = {
            "id": rep.id,
            "provider_id": rep.provider_id,
            "service_type": rep.service_type,
            "service_definition": ServiceDefinitionSchema(
                location_originate=LocationSchema(asn=rep.asn, country=rep.country, city=rep.city)
            ),
        }
        if isinstance(proposal.metrics, MetricsMatch):
            fields["metrics"] = proposal.metrics.payload
        elif isinstance(proposal.metrics, MetricsNoMatch):
            fields["metrics"] = dict(EMPTY_METRICS)
        return cls(**fields)


class ProposalsListResponse(BaseModel):
    proposals: list[ProposalSchema]

    @classmethod
    def from_enriched(cls, proposals: list[EnrichedProposal]) -> ProposalsListResponse:
        return cls(proposals=[ProposalSchema.from_enriched(p) for p in proposals])

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class QualityOracleEnvelope(BaseModel):
    proposals: list[Any] = Field(default_factory=list)


class ProposalReferenceSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    provider_id: str = Field(alias="providerId")
    service_type: str = Field(alias="serviceType")


class QualityRecordSchema(BaseModel):
    """Only the embedded proposal reference is validated; the rest is opaque."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    proposal_id: ProposalReferenceSchema = Field(alias="proposalId")


class HealthResponse(BaseModel):
    status: str
    registry_url: str
    quality_oracle_url: str
