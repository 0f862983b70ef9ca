"""``== Zmq ==`` methods."""

from corerpc.registry.descriptor import MethodDescriptor, since
from corerpc.types import zmq as t

DESCRIPTORS = (
    MethodDescriptor("getzmqnotifications", since(17), list[t.ZmqNotification]),
)
