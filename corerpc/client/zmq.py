"""Typed calls for the ``== Zmq ==`` section."""

from __future__ import annotations

from corerpc.types import zmq as t


class ZmqMixin:
    def get_zmq_notifications(self) -> list[t.ZmqNotification]:
        """Active publishers; empty when the daemon runs without ``-zmqpub*``."""
        return self.call("getzmqnotifications")
