"""
Exception hierarchy for corerpc.

Every failed call surfaces as exactly one subclass of CoreRpcError carrying
the method name, the resolved daemon version and enough of the underlying
code/message to debug the failure without the raw payload.

Provides:
- The closed error taxonomy (lookup, protocol, validation, transport, server)
- Error categories for coarse handling by callers
- Safe error message formatting (no credential leak)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from corerpc.version import DaemonVersion


class ErrorCategory(Enum):
    """Error categories for classification."""
    LOOKUP = "lookup"
    PROTOCOL = "protocol"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    APPLICATION = "application"


class TransportKind(Enum):
    """What went wrong below the JSON-RPC layer."""
    CONNECTION_REFUSED = "connection_refused"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    UNAUTHORIZED = "unauthorized"
    NETWORK = "network"
    UNKNOWN = "unknown"


class CoreRpcError(Exception):
    """Base exception for all corerpc call failures."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.APPLICATION,
        *,
        method: str | None = None,
        version: DaemonVersion | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.method = method
        self.version = version
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "method": self.method,
            "version": self.version.label if self.version is not None else None,
            "details": self.details,
        }

    def __str__(self) -> str:
        context = []
        if self.method:
            context.append(f"method={self.method}")
        if self.version is not None:
            context.append(f"version={self.version.label}")
        suffix = f" ({', '.join(context)})" if context else ""
        return f"[{self.code}] {self.message}{suffix}"


# --- lookup ---------------------------------------------------------------


class UnsupportedMethod(CoreRpcError):
    """No descriptor exists for the method at all."""

    def __init__(self, method: str, version: DaemonVersion | None = None):
        super().__init__(
            f"unsupported method: {method}",
            code="UNSUPPORTED_METHOD",
            category=ErrorCategory.LOOKUP,
            method=method,
            version=version,
        )


class UnsupportedVersion(CoreRpcError):
    """Descriptors exist for the method but none covers the version."""

    def __init__(
        self,
        method: str | None,
        version: DaemonVersion | None,
        supported: list[str] | None = None,
        message: str | None = None,
    ):
        supported = supported or []
        if message is None:
            label = version.label if version is not None else "unknown version"
            message = f"{method} is not available on {label}"
            if supported:
                message += f" (available: {', '.join(supported)})"
        super().__init__(
            message,
            code="UNSUPPORTED_VERSION",
            category=ErrorCategory.LOOKUP,
            method=method,
            version=version,
            details={"supported": supported},
        )
        self.supported = supported


# --- protocol -------------------------------------------------------------


class MalformedEnvelope(CoreRpcError):
    """Response bytes are not a usable JSON-RPC response object."""

    def __init__(
        self,
        reason: str,
        *,
        method: str | None = None,
        version: DaemonVersion | None = None,
    ):
        super().__init__(
            f"malformed response envelope: {reason}",
            code="MALFORMED_ENVELOPE",
            category=ErrorCategory.PROTOCOL,
            method=method,
            version=version,
            details={"reason": reason},
        )
        self.reason = reason


class CorrelationMismatch(CoreRpcError):
    """Response id does not match the request id."""

    def __init__(
        self,
        expected: Any,
        actual: Any,
        *,
        method: str | None = None,
        version: DaemonVersion | None = None,
    ):
        super().__init__(
            f"response id {actual!r} does not match request id {expected!r}",
            code="CORRELATION_MISMATCH",
            category=ErrorCategory.PROTOCOL,
            method=method,
            version=version,
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


# --- validation -----------------------------------------------------------


class MissingField(CoreRpcError):
    """A required field is absent from a success payload."""

    def __init__(
        self,
        field: str,
        *,
        method: str | None = None,
        version: DaemonVersion | None = None,
    ):
        super().__init__(
            f"missing required field '{field}'",
            code="MISSING_FIELD",
            category=ErrorCategory.VALIDATION,
            method=method,
            version=version,
            details={"field": field},
        )
        self.field = field


class TypeMismatch(CoreRpcError):
    """A field is present but not encoded the way the shape declares."""

    def __init__(
        self,
        field: str,
        expected: str,
        actual: str,
        *,
        method: str | None = None,
        version: DaemonVersion | None = None,
    ):
        super().__init__(
            f"field '{field}' expected {expected}, got {actual}",
            code="TYPE_MISMATCH",
            category=ErrorCategory.VALIDATION,
            method=method,
            version=version,
            details={"field": field, "expected": expected, "actual": actual},
        )
        self.field = field
        self.expected = expected
        self.actual = actual


# --- transport ------------------------------------------------------------


class TransportError(CoreRpcError):
    """The request never produced a JSON-RPC response."""

    def __init__(
        self,
        kind: TransportKind,
        message: str,
        *,
        status: int | None = None,
        method: str | None = None,
        version: DaemonVersion | None = None,
    ):
        super().__init__(
            sanitize_error_message(message),
            code="TRANSPORT_ERROR",
            category=ErrorCategory.TRANSPORT,
            method=method,
            version=version,
            details={"kind": kind.value, "status": status},
        )
        self.kind = kind
        self.status = status


# --- daemon errors --------------------------------------------------------


class RpcServerError(CoreRpcError):
    """Base for errors reported by the daemon through a JSON-RPC error object."""

    code_name = "RPC_ERROR"
    category_value = ErrorCategory.APPLICATION

    def __init__(
        self,
        message: str,
        *,
        rpc_code: int | None = None,
        data: Any = None,
        method: str | None = None,
        version: DaemonVersion | None = None,
        status: int | None = None,
    ):
        details: dict[str, Any] = {"rpc_code": rpc_code}
        if data is not None:
            details["data"] = data
        if status is not None:
            details["status"] = status
        super().__init__(
            sanitize_error_message(message),
            code=self.code_name,
            category=self.category_value,
            method=method,
            version=version,
            details=details,
        )
        self.rpc_code = rpc_code
        self.rpc_message = message
        self.data = data
        self.status = status


class AuthenticationFailed(RpcServerError):
    """Credentials or wallet passphrase rejected."""
    code_name = "AUTHENTICATION_FAILED"
    category_value = ErrorCategory.PERMISSION


class MethodNotFound(RpcServerError):
    """The daemon does not know the method (or it is disabled)."""
    code_name = "METHOD_NOT_FOUND"
    category_value = ErrorCategory.NOT_FOUND


class InvalidParameters(RpcServerError):
    """Arguments rejected, locally while building (rpc_code None) or by the daemon."""
    code_name = "INVALID_PARAMETERS"
    category_value = ErrorCategory.VALIDATION


class ApplicationError(RpcServerError):
    """Any other daemon error code."""
    code_name = "APPLICATION_ERROR"
    category_value = ErrorCategory.APPLICATION


_SENSITIVE_PATTERNS = [
    re.compile(r"(rpcpassword|password|passphrase|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"basic\s+[a-zA-Z0-9+/]+=*", re.IGNORECASE),
    re.compile(r"__cookie__:[0-9a-f]+", re.IGNORECASE),
    re.compile(r"//[^/\s:@]+:[^/\s@]+@"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized
