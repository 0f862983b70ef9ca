"""``== Network ==`` methods."""

from corerpc.registry.descriptor import MethodDescriptor, Param, between, since
from corerpc.types import network as t
from corerpc.types.primitives import Bool, Int, Str

# Version negotiation runs before the version is known, so it uses the
# slice of getnetworkinfo that every release shares. Kept out of the table.
NODE_VERSION = MethodDescriptor(
    "getnetworkinfo", since(17), t.NodeVersionInfo, rpc_method="getnetworkinfo"
)

DESCRIPTORS = (
    MethodDescriptor("getnetworkinfo", between(17, 18), t.GetNetworkInfoV17),
    MethodDescriptor("getnetworkinfo", between(19, 20), t.GetNetworkInfoV19),
    MethodDescriptor("getnetworkinfo", between(21, 27), t.GetNetworkInfoV21),
    MethodDescriptor("getnetworkinfo", since(28), t.GetNetworkInfoV28),
    MethodDescriptor("getconnectioncount", since(17), Int),
    MethodDescriptor("getnettotals", since(17), t.GetNetTotals),
    MethodDescriptor("getpeerinfo", since(17), list[t.PeerInfo]),
    MethodDescriptor(
        "addnode", since(17), None,
        params=(Param("node", Str, required=True), Param("command", Str, required=True)),
    ),
    MethodDescriptor(
        "disconnectnode", since(17), None,
        params=(Param("address", Str, default=""), Param("nodeid", Int)),
    ),
    MethodDescriptor(
        "setnetworkactive", since(17), Bool,
        params=(Param("state", Bool, required=True),),
    ),
    MethodDescriptor("ping", since(17), None),
    MethodDescriptor("listbanned", since(17), list[t.BannedSubnet]),
    MethodDescriptor("clearbanned", since(17), None),
    MethodDescriptor("getaddednodeinfo", since(17), list[t.AddedNode], params=(Param("node", Str),)),
    MethodDescriptor(
        "getnodeaddresses", between(18, 21), list[t.NodeAddress],
        params=(Param("count", Int, default=1),),
    ),
    MethodDescriptor(
        "getnodeaddresses", since(22), list[t.NodeAddress],
        params=(Param("count", Int, default=1), Param("network", Str)),
    ),
)
