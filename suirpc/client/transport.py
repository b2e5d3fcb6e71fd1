"""HTTP exchange with the full node."""

from __future__ import annotations

import httpx
from loguru import logger

from suirpc.config.schema import ClientConfig
from suirpc.utils.exceptions import NetworkError, TransportError, sanitize_error_message

JSON_HEADERS = {"Content-Type": "application/json"}


class RpcTransport:
    """POSTs encoded requests through the config's shared httpx client.

    Holds no per-call state; concurrent calls only share the httpx client,
    whose pooling and retry policy belong to httpx.
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    async def post(self, url: str, body: bytes) -> httpx.Response:
        """Perform the POST and return the raw response, whatever its status."""
        client = self.config.get_http_client()
        try:
            resp = await client.post(url, content=body, headers=JSON_HEADERS)
        except httpx.TimeoutException as exc:
            raise NetworkError(
                f"timeout posting to {sanitize_error_message(url)}",
                timeout=True,
            ) from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"network error posting to {sanitize_error_message(url)}: {exc}") from exc
        logger.debug(f"RPC response {resp.status_code} ({len(resp.content)} bytes)")
        return resp

    async def send(self, url: str, body: bytes) -> bytes:
        """POST ``body`` and return the response body; non-2xx raises TransportError."""
        resp = await self.post(url, body)
        if not resp.is_success:
            raise TransportError(resp.status_code)
        return resp.content
