"""Typed calls for the ``== Network ==`` section."""

from __future__ import annotations

from corerpc.types import network as t


class NetworkMixin:
    def get_network_info(self) -> t.GetNetworkInfo:
        return self.call("getnetworkinfo")

    def get_connection_count(self) -> int:
        return self.call("getconnectioncount")

    def get_net_totals(self) -> t.GetNetTotals:
        return self.call("getnettotals")

    def get_peer_info(self) -> list[t.PeerInfo]:
        return self.call("getpeerinfo")

    def add_node(self, node: str, command: str) -> None:
        return self.call("addnode", node, command)

    def disconnect_node(self, address: str | None = None, nodeid: int | None = None) -> None:
        return self.call("disconnectnode", address=address, nodeid=nodeid)

    def set_network_active(self, state: bool) -> bool:
        return self.call("setnetworkactive", state)

    def ping(self) -> None:
        return self.call("ping")

    def list_banned(self) -> list[t.BannedSubnet]:
        return self.call("listbanned")

    def clear_banned(self) -> None:
        return self.call("clearbanned")

    def get_added_node_info(self, node: str | None = None) -> list[t.AddedNode]:
        return self.call("getaddednodeinfo", node=node)

    def get_node_addresses(self, count: int | None = None, network: str | None = None) -> list[t.NodeAddress]:
        """``network`` is accepted from v22 on."""
        return self.call("getnodeaddresses", count=count, network=network)
