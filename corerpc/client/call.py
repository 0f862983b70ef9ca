"""
Single-call lifecycle.

An ``RpcCall`` is created per invocation and walks
BUILDING -> SENT -> DECODING -> SUCCEEDED | FAILED exactly once. There is no
retry: a failed call is reported, and the caller decides what to do.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Sequence

from loguru import logger

from corerpc.classifier import classify_failure, classify_transport_failure
from corerpc.errors import CoreRpcError, InvalidParameters
from corerpc.mapper import map_result
from corerpc.registry.descriptor import MethodDescriptor
from corerpc.transport.base import Transport
from corerpc.version import DaemonVersion
from corerpc.wire.codec import (
    DEFAULT_PROTOCOL,
    ProtocolTag,
    RequestEnvelope,
    RequestId,
    RpcFailure,
    decode_response,
    encode_request,
)


class CallState(Enum):
    BUILDING = "building"
    SENT = "sent"
    DECODING = "decoding"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


_TERMINAL = frozenset({CallState.SUCCEEDED, CallState.FAILED})


class RpcCall:
    """One request/response exchange for a resolved descriptor."""

    def __init__(
        self,
        descriptor: MethodDescriptor,
        version: DaemonVersion | None,
        request_id: RequestId,
        *,
        protocol: ProtocolTag = DEFAULT_PROTOCOL,
    ) -> None:
        self.descriptor = descriptor
        self.version = version
        self.request_id = request_id
        self.protocol = protocol
        self.state = CallState.BUILDING
        self.error: CoreRpcError | None = None

    @property
    def method(self) -> str:
        return self.descriptor.name

    @property
    def version_label(self) -> str:
        # unknown only while negotiating
        return self.version.label if self.version is not None else "unknown version"

    def _advance(self, state: CallState) -> None:
        logger.debug(f"RPC {self.method}#{self.request_id} ({self.version_label}): {self.state.value} -> {state.value}")
        self.state = state

    def _fail(self, error: CoreRpcError) -> CoreRpcError:
        if error.method is None:
            error.method = self.method
        if error.version is None:
            error.version = self.version
        self.error = error
        self._advance(CallState.FAILED)
        logger.warning(f"RPC {self.method} failed on {self.version_label}: {error}")
        return error

    def execute(
        self,
        transport: Transport,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Run the call to completion.

        Returns the typed response value, or raises exactly one CoreRpcError.
        """
        if self.state is not CallState.BUILDING:
            raise RuntimeError(f"RpcCall for {self.method} already executed (state={self.state.value})")

        try:
            params = self.descriptor.bind(args, kwargs, version=self.version)
            payload = encode_request(
                RequestEnvelope(self.descriptor.rpc_method, params, self.request_id), self.protocol
            )
        except CoreRpcError as e:
            raise self._fail(e)
        except (TypeError, ValueError) as e:
            raise self._fail(InvalidParameters(f"cannot encode arguments: {e}")) from e

        self._advance(CallState.SENT)
        try:
            body = transport.send(payload)
        except CoreRpcError as e:
            raise self._fail(e)
        except Exception as e:
            error = classify_transport_failure(
                e, method=self.method, version=self.version, request_id=self.request_id
            )
            raise self._fail(error) from e

        self._advance(CallState.DECODING)
        try:
            outcome = decode_response(body, self.request_id)
            if isinstance(outcome, RpcFailure):
                raise classify_failure(outcome, method=self.method, version=self.version)
            value = map_result(
                outcome.result, self.descriptor.response, method=self.method, version=self.version
            )
        except CoreRpcError as e:
            raise self._fail(e)

        self._advance(CallState.SUCCEEDED)
        return value

    @property
    def finished(self) -> bool:
        return self.state in _TERMINAL
