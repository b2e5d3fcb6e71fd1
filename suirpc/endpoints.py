"""
Sui network endpoints.

Maps a network selector to the full-node JSON-RPC URL.
"""

from __future__ import annotations

from enum import Enum


class Endpoint(str, Enum):
    """Network selector for a client."""
    CUSTOM = "custom"
    DEVNET = "devnet"
    TESTNET = "testnet"
    MAINNET = "mainnet"

    @classmethod
    def parse(cls, value: "Endpoint | str") -> "Endpoint":
        """Accept an Endpoint or its name in any case ("devnet", "MAINNET")."""
        if isinstance(value, Endpoint):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown endpoint: {value!r}")


FULLNODE_URLS: dict[Endpoint, str] = {
    Endpoint.DEVNET: "https://fullnode.devnet.sui.io:443",
    Endpoint.TESTNET: "https://fullnode.testnet.sui.io:443",
    Endpoint.MAINNET: "https://fullnode.sui.io:443",
}


def resolve_endpoint(endpoint: Endpoint, custom_url: str = "") -> str:
    """Return the base URL for ``endpoint``; CUSTOM returns ``custom_url`` unchanged."""
    if endpoint is Endpoint.CUSTOM:
        return custom_url
    return FULLNODE_URLS[endpoint]
