"""Client construction helpers."""

from __future__ import annotations

from typing import Any

import httpx

from suirpc.client.http_client import SuiHttpClient
from suirpc.config.schema import ClientConfig


def create_sui_http_client(
    config: ClientConfig | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
    **overrides: Any,
) -> SuiHttpClient:
    """
    Create a SuiHttpClient.

    ``overrides`` are ClientConfig fields (``endpoint="mainnet"``,
    ``agent_name=...``, ``max_retries=...``) applied on top of ``config``, or on
    top of the ``SUIRPC_*`` environment when no config is given.

    Example:
        client = create_sui_http_client(endpoint=Endpoint.DEVNET, agent_name="wallet/1.0", max_retries=10)
    """
    if config is None:
        fields: dict[str, Any] = dict(overrides)
    elif not overrides and http_client is None:
        return SuiHttpClient(config)
    else:
        # Never mutate the caller's config; a client it created stays its own.
        fields = {**config.model_dump(), **overrides}
        if http_client is None and not config.owns_http_client:
            http_client = config.http_client
    if http_client is not None:
        fields["http_client"] = http_client
    return SuiHttpClient(ClientConfig(**fields))
