"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Proposal registry
    registry_url: str = "http://localhost:8080/v1"

    # Quality oracle
    quality_oracle_url: str = "http://localhost:8085/api/v1"
    quality_metrics_path: str = "/proposals/metrics"

    # Timeouts
    source_timeout_seconds: float = 5.0
    request_budget_seconds: float = 10.0

    # Server
    host: str = "0.0.0.0"
    port: int = 4050

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {"env_file": ".env", "env_prefix": "DISCOVERY_"}
