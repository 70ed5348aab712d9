"""List proposals from a running discovery server and print them as a table."""

from __future__ import annotations

import argparse
import asyncio
import json

import httpx

DEFAULT_BASE_URL = "http://localhost:4050"
DEFAULT_TIMEOUT = 30.0


async def fetch_proposals(
    base_url: str, provider_id: str | None, with_metrics: bool
) -> list[dict]:
    params: dict[str, str] = {}
    if provider_id:
        params["providerId"] = provider_id
    if with_metrics:
        params["fetchConnectCounts"] = "true"

    async with httpx.AsyncClient(base_url=base_url, timeout=DEFAULT_TIMEOUT) as client:
        response = await client.get("/proposals", params=params)
        response.raise_for_status()
        return response.json()["proposals"]


def print_table(proposals: list[dict], with_metrics: bool) -> None:
    print(f"  {'id':>5}  {'provider':<44} {'service':<10} {'country':<8} {'asn':<10}")
    print(f"  {'-' * 82}")
    for p in proposals:
        location = p["serviceDefinition"]["locationOriginate"]
        print(
            f"  {p['id']:>5}  {p['providerId']:<44} {p['serviceType']:<10} "
            f"{location.get('country', ''):<8} {location['asn']:<10}"
        )
        if with_metrics:
            print(f"         metrics: {json.dumps(p.get('metrics'))}")
    print(f"\n  {len(proposals)} proposal(s)")


async def main(base_url: str, provider_id: str | None, with_metrics: bool) -> None:
    proposals = await fetch_proposals(base_url, provider_id, with_metrics)
    print_table(proposals, with_metrics)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="List service proposals")
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Base URL of the running server (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument("--provider-id", default=None, help="Only list this provider's proposals")
    parser.add_argument(
        "--metrics", action="store_true", help="Attach quality oracle metrics"
    )
    args = parser.parse_args()
    asyncio.run(main(args.base_url, args.provider_id, args.metrics))
