"""Quality oracle client over HTTP."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
from pydantic import ValidationError

from proposal_discovery.exceptions import ConfigurationError, QualitySourceError
from proposal_discovery.models.domain import QualityRecord
from proposal_discovery.models.schemas import QualityOracleEnvelope
from proposal_discovery.observability.logger import get_logger

logger = get_logger("quality_oracle_client")


class QualityOracleClient:
    """Fetches proposal quality entries; each entry is handed on undecoded."""

    def __init__(
        self,
        base_url: str,
        metrics_path: str = "/proposals/metrics",
        timeout_seconds: float = 5.0,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        if not base_url:
            raise ConfigurationError("Quality oracle URL is not configured")
        self._url = base_url.rstrip("/") + "/" + metrics_path.lstrip("/")
        self._timeout_seconds = timeout_seconds
        self._client_factory = client_factory

    async def fetch_all(self, timeout: float | None = None) -> list[QualityRecord]:
        effective_timeout = self._timeout_seconds if timeout is None else min(timeout, self._timeout_seconds)
        try:
            factory = self._client_factory or (lambda: httpx.AsyncClient(timeout=self._timeout_seconds))
            async with factory() as client:
                response = await client.get(self._url, timeout=effective_timeout)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise QualitySourceError(f"Quality oracle request failed: {exc!r}") from exc

        try:
            envelope = QualityOracleEnvelope.model_validate_json(response.content)
        except ValidationError as exc:
            raise QualitySourceError("Quality oracle returned an invalid body") from exc

        records = [QualityRecord(raw=json.dumps(entry).encode()) for entry in envelope.proposals]
        logger.debug("quality_records_fetched", count=len(records))
        return records
