"""JSON-RPC wire codec."""

from corerpc.wire.codec import (
    DEFAULT_PROTOCOL,
    RawOutcome,
    RequestEnvelope,
    RequestIds,
    RpcFailure,
    RpcSuccess,
    decode_response,
    dumps,
    encode_request,
    loads,
)

__all__ = [
    "DEFAULT_PROTOCOL",
    "RawOutcome",
    "RequestEnvelope",
    "RequestIds",
    "RpcFailure",
    "RpcSuccess",
    "decode_response",
    "dumps",
    "encode_request",
    "loads",
]
