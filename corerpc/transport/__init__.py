"""Transports that carry encoded requests to the daemon."""

from corerpc.transport.base import Transport, TransportFailure
from corerpc.transport.http import HttpTransport, read_cookie_file

__all__ = ["Transport", "TransportFailure", "HttpTransport", "read_cookie_file"]
