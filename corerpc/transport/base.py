"""Transport contract: the client hands over request bytes and gets response bytes back."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from corerpc.errors import TransportKind


class TransportFailure(Exception):
    """Raised by transports when no usable response body was obtained.

    ``body`` keeps the response bytes of a non-2xx HTTP answer: older daemons
    report RPC errors with status 500/404 and a JSON-RPC error object.
    """

    def __init__(
        self,
        kind: TransportKind,
        message: str,
        *,
        status: int | None = None,
        body: bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status = status
        self.body = body


@runtime_checkable
class Transport(Protocol):
    def send(self, payload: bytes) -> bytes:
        """Deliver one encoded request and return the raw response body."""
        ...
