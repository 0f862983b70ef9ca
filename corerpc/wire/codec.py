"""JSON-RPC envelope encoding and decoding.

Numbers are decoded losslessly: JSON decimals become ``Decimal`` and integers
stay ``int``. ``Decimal`` values are encoded as decimal strings, which the
daemon accepts wherever it takes an amount.
"""

from __future__ import annotations

import itertools
import json
import threading
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Literal

from corerpc.errors import CorrelationMismatch, MalformedEnvelope

RequestId = int | str
ProtocolTag = Literal["1.0", "2.0"]

DEFAULT_PROTOCOL: ProtocolTag = "2.0"


@dataclass(frozen=True)
class RequestEnvelope:
    """A single method call, consumed by the transport right after encoding."""
    method: str
    params: list[Any] = field(default_factory=list)
    id: RequestId = 0


@dataclass(frozen=True)
class RpcSuccess:
    id: RequestId | None
    result: Any


@dataclass(frozen=True)
class RpcFailure:
    id: RequestId | None
    code: int
    message: str
    data: Any = None


RawOutcome = RpcSuccess | RpcFailure


class RequestIds:
    """Thread-safe source of correlation ids, unique for the lifetime of a client."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return next(self._counter)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(value: Any) -> str:
    return json.dumps(value, default=_json_default, separators=(",", ":"))


def loads(text: str | bytes) -> Any:
    """Parse JSON keeping decimals exact."""
    return json.loads(text, parse_float=Decimal)


def encode_request(envelope: RequestEnvelope, protocol: ProtocolTag = DEFAULT_PROTOCOL) -> bytes:
    body = {
        "jsonrpc": protocol,
        "id": envelope.id,
        "method": envelope.method,
        "params": list(envelope.params),
    }
    return dumps(body).encode("utf-8")


def decode_response(body: bytes | str, expected_id: RequestId | None) -> RawOutcome:
    """
    Decode a response envelope.

    Accepts both the legacy shape (``result`` plus ``error: null``) and the
    JSON-RPC 2.0 shape where only one of the two keys is present.

    Raises:
        MalformedEnvelope: not JSON, not an object, or no result/error discriminant.
        CorrelationMismatch: the id does not match ``expected_id`` in value and type.
    """
    if not isinstance(body, (bytes, bytearray, str)):
        raise MalformedEnvelope(f"expected a bytes or str body, got {type(body).__name__}")
    try:
        text = body.decode("utf-8") if isinstance(body, (bytes, bytearray)) else body
        data = loads(text)
    except UnicodeDecodeError as e:
        raise MalformedEnvelope(f"body is not valid UTF-8: {e.reason}") from e
    except json.JSONDecodeError as e:
        raise MalformedEnvelope(f"body is not valid JSON: {e.msg} at position {e.pos}") from e

    if isinstance(data, list):
        raise MalformedEnvelope("batch responses are not supported for single calls")
    if not isinstance(data, dict):
        raise MalformedEnvelope(f"expected a JSON object, got {type(data).__name__}")

    error = data.get("error")
    has_error = error is not None
    if not has_error and "result" not in data:
        raise MalformedEnvelope("response has neither 'result' nor 'error'")

    response_id = data.get("id")
    # the daemon answers requests it could not parse with a null id
    if not (has_error and response_id is None):
        # 1.0 or true must not pass for request id 1
        if type(response_id) is not type(expected_id) or response_id != expected_id:
            raise CorrelationMismatch(expected_id, response_id)

    if not has_error:
        return RpcSuccess(id=response_id, result=data.get("result"))

    if not isinstance(error, dict):
        raise MalformedEnvelope(f"'error' must be an object, got {type(error).__name__}")
    code = error.get("code")
    message = error.get("message")
    if not isinstance(code, int) or isinstance(code, bool):
        raise MalformedEnvelope("error object lacks an integer 'code'")
    if not isinstance(message, str):
        raise MalformedEnvelope("error object lacks a string 'message'")
    return RpcFailure(id=response_id, code=code, message=message, data=error.get("data"))
