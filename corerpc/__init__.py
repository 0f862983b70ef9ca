"""corerpc - typed, version-aware JSON-RPC client for Bitcoin Core."""

__version__ = "0.1.0"

from corerpc.client import Client, negotiate_version
from corerpc.config import RpcSettings, get_settings, load_settings
from corerpc.errors import (
    ApplicationError,
    AuthenticationFailed,
    CoreRpcError,
    CorrelationMismatch,
    ErrorCategory,
    InvalidParameters,
    MalformedEnvelope,
    MethodNotFound,
    MissingField,
    RpcServerError,
    TransportError,
    TransportKind,
    TypeMismatch,
    UnsupportedMethod,
    UnsupportedVersion,
)
from corerpc.registry import DEFAULT_REGISTRY, MethodDescriptor, MethodRegistry
from corerpc.transport import HttpTransport, Transport, TransportFailure
from corerpc.version import DaemonVersion, VersionRange

__all__ = [
    "__version__",
    "Client",
    "negotiate_version",
    "RpcSettings",
    "get_settings",
    "load_settings",
    "ApplicationError",
    "AuthenticationFailed",
    "CoreRpcError",
    "CorrelationMismatch",
    "ErrorCategory",
    "InvalidParameters",
    "MalformedEnvelope",
    "MethodNotFound",
    "MissingField",
    "RpcServerError",
    "TransportError",
    "TransportKind",
    "TypeMismatch",
    "UnsupportedMethod",
    "UnsupportedVersion",
    "DEFAULT_REGISTRY",
    "MethodDescriptor",
    "MethodRegistry",
    "HttpTransport",
    "Transport",
    "TransportFailure",
    "DaemonVersion",
    "VersionRange",
]
