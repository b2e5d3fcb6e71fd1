"""Client configuration schema using Pydantic.

One ClientConfig per client instance; every call made through that client
reads it and none mutate it.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from suirpc import __version__
from suirpc.endpoints import Endpoint, resolve_endpoint


class ClientConfig(BaseSettings):
    """Endpoint selection, transport tuning and the shared HTTP client."""
    endpoint: Endpoint = Endpoint.DEVNET
    custom_url: str = ""  # Only read when endpoint is CUSTOM
    agent_name: str = f"suirpc/{__version__}"
    max_retries: int = Field(default=0, ge=0)  # Connection retries, handled by httpx
    timeout: float = Field(default=30.0, gt=0)
    # Injected transport; created lazily when not supplied.
    http_client: httpx.AsyncClient | None = Field(default=None, exclude=True)

    _owns_http_client: bool = PrivateAttr(default=False)

    model_config = SettingsConfigDict(
        env_prefix="SUIRPC_",
        arbitrary_types_allowed=True,
    )

    @field_validator("endpoint", mode="before")
    @classmethod
    def _parse_endpoint(cls, value: Any) -> Endpoint:
        return Endpoint.parse(value)

    @property
    def base_url(self) -> str:
        """Resolved full-node URL for this configuration."""
        return resolve_endpoint(self.endpoint, self.custom_url)

    @property
    def owns_http_client(self) -> bool:
        return self._owns_http_client

    def get_http_client(self) -> httpx.AsyncClient:
        """Return the injected client, or create one from the tuning parameters."""
        if self.http_client is None:
            self.http_client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.agent_name},
                transport=httpx.AsyncHTTPTransport(retries=self.max_retries),
            )
            self._owns_http_client = True
        return self.http_client

    async def aclose(self) -> None:
        """Close the HTTP client if this config created it."""
        if self.http_client is not None and self._owns_http_client:
            await self.http_client.aclose()
            self.http_client = None
            self._owns_http_client = False
