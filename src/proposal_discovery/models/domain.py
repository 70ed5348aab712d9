"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Union


@dataclass(frozen=True)
class Location:
    asn: str = ""
    country: str = ""
    city: str = ""


@dataclass(frozen=True)
class ServiceDefinition:
    location_originate: Location = field(default_factory=Location)


@dataclass(frozen=True)
class ServiceProposal:
    id: int  # unique per provider
    provider_id: str
    service_type: str
    service_definition: ServiceDefinition = field(default_factory=ServiceDefinition)


@dataclass(frozen=True)
class QualityRecord:
    """Opaque oracle entry, kept in its encoded form until decoded."""

    raw: bytes


class ProposalKey(NamedTuple):
    provider_id: str
    service_type: str

    @property
    def formatted(self) -> str:
        return f"{self.provider_id}-{self.service_type}"


@dataclass(frozen=True)
class ProposalReference:
    provider_id: str
    service_type: str


@dataclass(frozen=True)
class DecodedQualityRecord:
    reference: ProposalReference
    payload: Any


@dataclass(frozen=True)
class ProposalRepresentation:
    id: int
    provider_id: str
    service_type: str
    asn: str
    country: str
    city: str


@dataclass(frozen=True)
class MetricsNotRequested:
    pass


@dataclass(frozen=True)
class MetricsNoMatch:
    pass


@dataclass(frozen=True)
class MetricsMatch:
    payload: Any


MetricsState = Union[MetricsNotRequested, MetricsNoMatch, MetricsMatch]

NOT_REQUESTED = MetricsNotRequested()
NO_MATCH = MetricsNoMatch()


@dataclass(frozen=True)
class EnrichedProposal:
    representation: ProposalRepresentation
    metrics: MetricsState = NOT_REQUESTED


QualityIndex = dict[ProposalKey, Any]


class EnrichmentStatus(str, Enum):
    NOT_REQUESTED = "not_requested"
    APPLIED = "applied"
    SOURCE_FAILED = "source_failed"
    MALFORMED_RECORD = "malformed_record"
    DEADLINE_EXCEEDED = "deadline_exceeded"
