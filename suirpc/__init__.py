"""
suirpc - asyncio client for the Sui full-node JSON-RPC API.
"""

__version__ = "0.1.0"

from loguru import logger

from suirpc.endpoints import Endpoint, resolve_endpoint
from suirpc.config import ClientConfig, load_config
from suirpc.client import SuiHttpClient, create_sui_http_client
from suirpc.utils.exceptions import (
    SuiRpcError,
    TransportError,
    NetworkError,
    ProtocolError,
    DecodeError,
    ConfigError,
    UnsupportedMethodError,
)

# Silent unless the application opts in via suirpc.utils.configure_logging.
logger.disable("suirpc")

__all__ = [
    "__version__",
    "Endpoint",
    "resolve_endpoint",
    "ClientConfig",
    "load_config",
    "SuiHttpClient",
    "create_sui_http_client",
    "SuiRpcError",
    "TransportError",
    "NetworkError",
    "ProtocolError",
    "DecodeError",
    "ConfigError",
    "UnsupportedMethodError",
]
