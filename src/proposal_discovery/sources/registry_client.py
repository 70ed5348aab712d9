"""Proposal registry client over HTTP."""

from __future__ import annotations

from collections.abc import Callable

import httpx
from pydantic import ValidationError

from proposal_discovery.exceptions import ConfigurationError, SourceUnavailable
from proposal_discovery.models.domain import ServiceProposal
from proposal_discovery.models.schemas import RegistryProposalsEnvelope
from proposal_discovery.observability.logger import get_logger

logger = get_logger("registry_client")


class RegistryClient:
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        if not base_url:
            raise ConfigurationError("Proposal registry URL is not configured")
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._client_factory = client_factory

    async def find_proposals(
        self, provider_id: str | None = None, timeout: float | None = None
    ) -> list[ServiceProposal]:
        params: dict[str, str] = {}
        if provider_id:
            params["providerId"] = provider_id

        effective_timeout = self._timeout_seconds if timeout is None else min(timeout, self._timeout_seconds)
        try:
            factory = self._client_factory or (lambda: httpx.AsyncClient(timeout=self._timeout_seconds))
            async with factory() as client:
                response = await client.get(
                    f"{self._base_url}/proposals", params=params, timeout=effective_timeout
                )
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise SourceUnavailable("Proposal registry timed out") from exc
        except httpx.HTTPStatusError as exc:
            raise SourceUnavailable(
                f"Proposal registry returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceUnavailable(f"Proposal registry request failed: {exc}") from exc

        try:
            envelope = RegistryProposalsEnvelope.model_validate_json(response.content)
        except ValidationError as exc:
            raise SourceUnavailable("Proposal registry returned an invalid body") from exc

        proposals = [p.to_domain() for p in envelope.proposals]
        logger.debug("proposals_fetched", count=len(proposals), provider_id=provider_id)
        return proposals
