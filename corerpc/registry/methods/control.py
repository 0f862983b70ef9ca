"""``== Control ==`` methods."""

from corerpc.registry.descriptor import MethodDescriptor, Param, since
from corerpc.types import control as t
from corerpc.types.primitives import Bool, Int, Str

DESCRIPTORS = (
    MethodDescriptor("uptime", since(17), Int),
    MethodDescriptor("getmemoryinfo", since(17), t.GetMemoryInfoStats),
    MethodDescriptor("stop", since(17), Str),
    MethodDescriptor("help", since(17), Str, params=(Param("command", Str),)),
    MethodDescriptor("getrpcinfo", since(18), t.GetRpcInfo),
    MethodDescriptor(
        "logging", since(17), dict[str, Bool],
        params=(Param("include", list[Str], default=[]), Param("exclude", list[Str])),
    ),
)
