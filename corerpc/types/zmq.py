"""Response shapes for the ``== Zmq ==`` section."""

from __future__ import annotations

from corerpc.types.primitives import Int, RpcModel, Str


class ZmqNotification(RpcModel):
    type: Str
    address: Str
    # v19+, outbound message high water mark
    hwm: Int | None = None
