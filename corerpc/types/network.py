"""Response shapes for the ``== Network ==`` section."""

from __future__ import annotations

from typing import Union

from pydantic import Field

from corerpc.types.primitives import Amount, Bool, Hex, Int, Number, RpcModel, Str


class NodeVersionInfo(RpcModel):
    """The version-agnostic slice of ``getnetworkinfo`` used to negotiate the version."""
    version: Int
    subversion: Str
    protocol_version: Int | None = Field(None, alias="protocolversion")


class NetworkReachability(RpcModel):
    name: Str
    limited: Bool
    reachable: Bool
    proxy: Str
    proxy_randomize_credentials: Bool


class LocalAddress(RpcModel):
    address: Str
    port: Int
    score: Int


class GetNetworkInfoV17(RpcModel):
    version: Int
    subversion: Str
    protocol_version: Int = Field(alias="protocolversion")
    local_services: Hex = Field(alias="localservices")
    local_relay: Bool = Field(alias="localrelay")
    time_offset: Int = Field(alias="timeoffset")
    connections: Int
    network_active: Bool = Field(alias="networkactive")
    networks: list[NetworkReachability]
    relay_fee: Amount = Field(alias="relayfee")
    incremental_fee: Amount = Field(alias="incrementalfee")
    local_addresses: list[LocalAddress] = Field(alias="localaddresses")
    warnings: Str


class GetNetworkInfoV19(GetNetworkInfoV17):
    local_services_names: list[Str] = Field(alias="localservicesnames")


class GetNetworkInfoV21(GetNetworkInfoV19):
    connections_in: Int
    connections_out: Int


class GetNetworkInfoV28(GetNetworkInfoV21):
    warnings: list[Str]


GetNetworkInfo = Union[GetNetworkInfoV17, GetNetworkInfoV19, GetNetworkInfoV21, GetNetworkInfoV28]


class UploadTarget(RpcModel):
    timeframe: Int
    target: Int
    target_reached: Bool
    serve_historical_blocks: Bool
    bytes_left_in_cycle: Int
    time_left_in_cycle: Int


class GetNetTotals(RpcModel):
    total_bytes_recv: Int = Field(alias="totalbytesrecv")
    total_bytes_sent: Int = Field(alias="totalbytessent")
    time_millis: Int = Field(alias="timemillis")
    upload_target: UploadTarget = Field(alias="uploadtarget")


class PeerInfo(RpcModel):
    """One ``getpeerinfo`` entry. Most fields come and go between releases."""
    id: Int
    addr: Str
    addr_bind: Str | None = Field(None, alias="addrbind")
    addr_local: Str | None = Field(None, alias="addrlocal")
    # v22+
    network: Str | None = None
    services: Hex
    # v19+
    services_names: list[Str] | None = Field(None, alias="servicesnames")
    relay_txes: Bool | None = Field(None, alias="relaytxes")
    last_send: Int = Field(alias="lastsend")
    last_recv: Int = Field(alias="lastrecv")
    bytes_sent: Int = Field(alias="bytessent")
    bytes_recv: Int = Field(alias="bytesrecv")
    conn_time: Int = Field(alias="conntime")
    time_offset: Int = Field(alias="timeoffset")
    ping_time: Number | None = Field(None, alias="pingtime")
    min_ping: Number | None = Field(None, alias="minping")
    version: Int
    subver: Str
    inbound: Bool
    starting_height: Int | None = Field(None, alias="startingheight")
    synced_headers: Int | None = None
    synced_blocks: Int | None = None
    # v21+
    connection_type: Str | None = None


class BannedSubnet(RpcModel):
    address: Str
    banned_until: Int
    ban_created: Int
    # v25+
    ban_duration: Int | None = None
    time_remaining: Int | None = None


class AddedNodeAddress(RpcModel):
    address: Str
    # "inbound" or "outbound"
    connected: Str


class AddedNode(RpcModel):
    added_node: Str = Field(alias="addednode")
    connected: Bool
    addresses: list[AddedNodeAddress]


class NodeAddress(RpcModel):
    """An address from the peer address manager."""
    time: Int
    services: Int
    address: Str
    port: Int
    # v22+
    network: Str | None = None
