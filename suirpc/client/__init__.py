"""JSON-RPC dispatch: request encoding, HTTP exchange and response decoding."""

from suirpc.client.decoding import Err, Ok, Response, RpcResult, decode_envelope, decode_plain, decode_result, unwrap
from suirpc.client.encoding import (
    BoolParam,
    IntParam,
    JsonParam,
    ModelParam,
    Param,
    StrParam,
    build_request,
    encode_param,
    encode_request,
)
from suirpc.client.factory import create_sui_http_client
from suirpc.client.http_client import SuiHttpClient
from suirpc.client.transport import RpcTransport

__all__ = [
    "SuiHttpClient",
    "create_sui_http_client",
    "RpcTransport",
    "Ok",
    "Err",
    "Response",
    "RpcResult",
    "decode_plain",
    "decode_envelope",
    "decode_result",
    "unwrap",
    "Param",
    "StrParam",
    "IntParam",
    "BoolParam",
    "JsonParam",
    "ModelParam",
    "build_request",
    "encode_param",
    "encode_request",
]
