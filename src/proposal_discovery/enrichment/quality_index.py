"""Decode quality oracle records and index them by proposal key."""

from __future__ import annotations

import json
from collections.abc import Iterable

from pydantic import ValidationError

from proposal_discovery.enrichment.keys import proposal_key
from proposal_discovery.exceptions import QualityRecordDecodeError
from proposal_discovery.models.domain import (
    DecodedQualityRecord,
    ProposalReference,
    QualityIndex,
    QualityRecord,
)
from proposal_discovery.models.schemas import QualityRecordSchema
from proposal_discovery.observability.logger import get_logger
from proposal_discovery.protocols.sources import QualityRecordDecoder

logger = get_logger("quality_index")


class JsonQualityRecordDecoder:
    """Decodes oracle entries of the form ``{"proposalId": {...}, ...}``.

    The whole entry becomes the metrics payload.
    """

    def decode(self, record: QualityRecord) -> DecodedQualityRecord:
        try:
            payload = json.loads(record.raw)
        except (ValueError, TypeError) as exc:
            raise QualityRecordDecodeError(f"Quality record is not valid JSON: {exc}") from exc

        try:
            parsed = QualityRecordSchema.model_validate(payload)
        except ValidationError as exc:
            raise QualityRecordDecodeError(
                f"Quality record has no usable proposal reference: {exc.error_count()} errors"
            ) from exc

        ref = parsed.proposal_id
        return DecodedQualityRecord(
            reference=ProposalReference(provider_id=ref.provider_id, service_type=ref.service_type),
            payload=payload,
        )


def build_quality_index(
    records: Iterable[QualityRecord],
    decoder: QualityRecordDecoder,
) -> QualityIndex:
    """Index record payloads by proposal key.

    All or nothing: the first record that fails to decode raises
    QualityRecordDecodeError and no index is returned. Records sharing a key
    overwrite each other, the last one wins.
    """
    index: QualityIndex = {}
    for position, record in enumerate(records):
        try:
            decoded = decoder.decode(record)
        except QualityRecordDecodeError as exc:
            raise QualityRecordDecodeError(f"record {position}: {exc}") from exc
        index[proposal_key(decoded.reference)] = decoded.payload

    logger.debug("quality_index_built", entries=len(index))
    return index
