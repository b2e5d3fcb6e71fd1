"""
JSON-RPC response decoding.

Two modes:

- plain: the body is validated directly into the target type. Plain targets
  are body-shaped models whose ``value`` is aliased to ``result`` (see
  ``GasPrice``) or ``RpcResult[T]`` for object payloads.
- envelope: the body is read as ``Ok(data) | Err(message)`` keyed by the
  ``result`` / ``error`` members, then unwrapped; ``Err`` raises ProtocolError.

Anything that does not match the expected shape raises DecodeError, never
ProtocolError, so callers can tell a rejected request from a schema mismatch.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar, Union

from pydantic import Field, TypeAdapter, ValidationError

from suirpc.models.base import SuiModel
from suirpc.utils.exceptions import DecodeError, ProtocolError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    data: T


@dataclass(frozen=True)
class Err:
    message: str
    code: int | None = None
    data: Any = None


Response = Union[Ok[T], Err]


class RpcResult(SuiModel, Generic[T]):
    """Plain-mode body wrapper: ``{"result": <T>, ...}``."""
    value: T = Field(alias="result")


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def parse_body(body: bytes | str) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"response is not valid JSON: {exc}", body) from exc


def _validate(type_: Any, value: Any, body: bytes | str) -> Any:
    try:
        return _adapter(type_).validate_python(value)
    except ValidationError as exc:
        raise DecodeError(
            f"response does not match {getattr(type_, '__name__', repr(type_))}: "
            f"{exc.error_count()} validation error(s): {exc.errors()[0].get('msg', '')}",
            body,
        ) from exc


def decode_plain(body: bytes | str, type_: type[T] | Any) -> T:
    """Validate the whole body into ``type_``."""
    return _validate(type_, parse_body(body), body)


def _error_from_payload(error: Any) -> Err:
    if isinstance(error, str):
        return Err(message=error)
    if isinstance(error, dict):
        message = error.get("message")
        code = error.get("code")
        return Err(
            message=str(message) if message is not None else json.dumps(error),
            code=code if isinstance(code, int) else None,
            data=error.get("data"),
        )
    return Err(message=json.dumps(error))


def decode_envelope(body: bytes | str, type_: type[T] | Any) -> Response[T]:
    """
    Read the body as ``Ok | Err``; exactly one of ``result`` / ``error`` must be present.

    An ``"error": null`` member counts as absent.
    """
    payload = parse_body(body)
    if not isinstance(payload, dict):
        raise DecodeError(f"expected a JSON-RPC object, got {type(payload).__name__}", body)
    has_result = "result" in payload
    has_error = payload.get("error") is not None
    if has_result and has_error:
        raise DecodeError("response carries both 'result' and 'error'", body)
    if has_error:
        return _error_from_payload(payload["error"])
    if has_result:
        return Ok(_validate(type_, payload["result"], body))
    raise DecodeError("response carries neither 'result' nor 'error'", body)


def unwrap(response: Response[T]) -> T:
    """Return the data of ``Ok``; raise ProtocolError for ``Err``."""
    if isinstance(response, Ok):
        return response.data
    if isinstance(response, Err):
        raise ProtocolError(response.message, rpc_code=response.code, data=response.data)
    raise TypeError(f"not a response variant: {type(response).__name__}")


def decode_result(body: bytes | str, type_: type[T] | Any) -> T:
    """Envelope decode followed by unwrap; the path every envelope-mode method takes."""
    return unwrap(decode_envelope(body, type_))
