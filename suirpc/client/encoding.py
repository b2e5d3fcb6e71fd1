"""
JSON-RPC request encoding.

Parameters are wrapped explicitly at each call site in one of a closed set of
variants, so turning them into JSON is a total function over known shapes:

- StrParam   -> JSON string
- IntParam   -> JSON number
- BoolParam  -> JSON boolean
- JsonParam  -> already-built JSON value, passed through
- ModelParam -> structured value (pydantic model, list of models, enum,
                root model) serialized through a pydantic TypeAdapter
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Sequence, Union

from pydantic import JsonValue, TypeAdapter

JSONRPC_VERSION = "2.0"
# Calls are never pipelined over one connection, so responses are not matched by id.
REQUEST_ID = 1


@dataclass(frozen=True)
class StrParam:
    value: str


@dataclass(frozen=True)
class IntParam:
    value: int


@dataclass(frozen=True)
class BoolParam:
    value: bool


@dataclass(frozen=True)
class JsonParam:
    value: JsonValue


@dataclass(frozen=True)
class ModelParam:
    """Structured value; ``type_`` overrides the runtime type used for serialization."""
    value: Any
    type_: Any = None


Param = Union[StrParam, IntParam, BoolParam, JsonParam, ModelParam]


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def encode_param(param: Param) -> Any:
    """Turn one wrapped parameter into its JSON value."""
    if isinstance(param, StrParam):
        return str(param.value)
    if isinstance(param, BoolParam):
        return bool(param.value)
    if isinstance(param, IntParam):
        return int(param.value)
    if isinstance(param, JsonParam):
        return param.value
    if isinstance(param, ModelParam):
        adapter = _adapter(param.type_ if param.type_ is not None else type(param.value))
        return adapter.dump_python(param.value, mode="json", by_alias=True, exclude_none=True)
    raise TypeError(f"Unsupported RPC parameter: {type(param).__name__}")


def build_request(method: str, params: Sequence[Param] = ()) -> dict[str, Any]:
    """Build the JSON-RPC 2.0 envelope; params keep call order, one element each."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": REQUEST_ID,
        "method": method,
        "params": [encode_param(p) for p in params],
    }


def encode_request(method: str, params: Sequence[Param] = ()) -> bytes:
    """Serialize the request envelope to a UTF-8 JSON body."""
    return json.dumps(build_request(method, params), separators=(",", ":")).encode("utf-8")
