"""
Map daemon error objects and transport failures onto the corerpc taxonomy.

Nothing raised below the client escapes unclassified: every path ends in a
CoreRpcError subclass.
"""

from __future__ import annotations

import json
from enum import IntEnum
from typing import Any

import httpx

from corerpc.errors import (
    ApplicationError,
    AuthenticationFailed,
    CoreRpcError,
    InvalidParameters,
    MethodNotFound,
    RpcServerError,
    TransportError,
    TransportKind,
)
from corerpc.transport.base import TransportFailure
from corerpc.version import DaemonVersion
from corerpc.wire.codec import RequestId, RpcFailure, loads


class RpcErrorCode(IntEnum):
    """Error codes documented by the daemon (``src/rpc/protocol.h``)."""
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    PARSE_ERROR = -32700

    MISC_ERROR = -1
    TYPE_ERROR = -3
    INVALID_ADDRESS_OR_KEY = -5
    OUT_OF_MEMORY = -7
    INVALID_PARAMETER = -8
    DATABASE_ERROR = -20
    DESERIALIZATION_ERROR = -22
    VERIFY_ERROR = -25
    VERIFY_REJECTED = -26
    VERIFY_ALREADY_IN_CHAIN = -27
    IN_WARMUP = -28
    METHOD_DEPRECATED = -32

    CLIENT_NOT_CONNECTED = -9
    CLIENT_IN_INITIAL_DOWNLOAD = -10
    CLIENT_NODE_ALREADY_ADDED = -23
    CLIENT_NODE_NOT_ADDED = -24
    CLIENT_NODE_NOT_CONNECTED = -29
    CLIENT_INVALID_IP_OR_SUBNET = -30
    CLIENT_P2P_DISABLED = -31
    CLIENT_NODE_CAPACITY_REACHED = -34

    WALLET_ERROR = -4
    WALLET_INSUFFICIENT_FUNDS = -6
    WALLET_INVALID_LABEL_NAME = -11
    WALLET_KEYPOOL_RAN_OUT = -12
    WALLET_UNLOCK_NEEDED = -13
    WALLET_PASSPHRASE_INCORRECT = -14
    WALLET_WRONG_ENC_STATE = -15
    WALLET_ENCRYPTION_FAILED = -16
    WALLET_ALREADY_UNLOCKED = -17
    WALLET_NOT_FOUND = -18
    WALLET_NOT_SPECIFIED = -19
    WALLET_ALREADY_LOADED = -35
    WALLET_ALREADY_EXISTS = -36


AUTHENTICATION_CODES = frozenset({
    RpcErrorCode.WALLET_UNLOCK_NEEDED,
    RpcErrorCode.WALLET_PASSPHRASE_INCORRECT,
})

_ERROR_BY_CODE: dict[int, type[RpcServerError]] = {
    RpcErrorCode.METHOD_NOT_FOUND: MethodNotFound,
    RpcErrorCode.INVALID_PARAMS: InvalidParameters,
    **{code: AuthenticationFailed for code in AUTHENTICATION_CODES},
}


def classify_error_object(
    code: int,
    message: str,
    data: Any = None,
    *,
    method: str | None = None,
    version: DaemonVersion | None = None,
    status: int | None = None,
) -> RpcServerError:
    """Typed error for a JSON-RPC error object returned by the daemon."""
    error_cls = _ERROR_BY_CODE.get(code, ApplicationError)
    return error_cls(message, rpc_code=code, data=data, method=method, version=version, status=status)


def classify_failure(
    failure: RpcFailure,
    *,
    method: str | None = None,
    version: DaemonVersion | None = None,
) -> RpcServerError:
    return classify_error_object(
        failure.code, failure.message, failure.data, method=method, version=version
    )


def _error_object_from_body(body: bytes | None, request_id: RequestId | None) -> dict[str, Any] | None:
    """The JSON-RPC error object inside a non-2xx body, if there is one."""
    if not body:
        return None
    try:
        data = loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    code = error.get("code")
    if not isinstance(code, int) or isinstance(code, bool) or not isinstance(error.get("message"), str):
        return None
    response_id = data.get("id")
    if request_id is not None and response_id is not None and response_id != request_id:
        return None
    return error


def _mentions_refused(exc: BaseException) -> bool:
    current: BaseException | None = exc
    while current is not None:
        if isinstance(current, ConnectionRefusedError) or "refused" in str(current).lower():
            return True
        current = current.__cause__ or current.__context__
    return False


def classify_transport_failure(
    exc: BaseException,
    *,
    method: str | None = None,
    version: DaemonVersion | None = None,
    request_id: RequestId | None = None,
) -> CoreRpcError:
    """
    Typed error for anything a transport raised.

    ``TransportFailure`` is the contract; plain OS errors and httpx
    exceptions from custom transports are mapped as well.
    """
    if isinstance(exc, CoreRpcError):
        return exc

    if isinstance(exc, TransportFailure):
        if exc.kind is TransportKind.UNAUTHORIZED or exc.status in (401, 403):
            return AuthenticationFailed(
                exc.message, method=method, version=version, status=exc.status
            )
        error = _error_object_from_body(exc.body, request_id)
        if error is not None:
            return classify_error_object(
                error["code"],
                error["message"],
                error.get("data"),
                method=method,
                version=version,
                status=exc.status,
            )
        return TransportError(exc.kind, exc.message, status=exc.status, method=method, version=version)

    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if status in (401, 403):
            return AuthenticationFailed(str(exc), method=method, version=version, status=status)
        return TransportError(TransportKind.HTTP_STATUS, str(exc), status=status, method=method, version=version)
    if isinstance(exc, httpx.TimeoutException):
        return TransportError(TransportKind.TIMEOUT, str(exc) or "timeout", method=method, version=version)
    if isinstance(exc, httpx.ConnectError):
        kind = TransportKind.CONNECTION_REFUSED if _mentions_refused(exc) else TransportKind.NETWORK
        return TransportError(kind, str(exc) or "connect failed", method=method, version=version)
    if isinstance(exc, httpx.RequestError):
        return TransportError(TransportKind.NETWORK, str(exc) or "network error", method=method, version=version)

    if isinstance(exc, ConnectionRefusedError):
        return TransportError(
            TransportKind.CONNECTION_REFUSED, str(exc) or "connection refused", method=method, version=version
        )
    if isinstance(exc, TimeoutError):
        return TransportError(TransportKind.TIMEOUT, str(exc) or "timeout", method=method, version=version)
    if isinstance(exc, OSError):
        return TransportError(TransportKind.NETWORK, str(exc) or "network error", method=method, version=version)
    return TransportError(
        TransportKind.UNKNOWN, f"{type(exc).__name__}: {exc}", method=method, version=version
    )
