"""Typed response shapes, one module per daemon API section."""

from corerpc.types.primitives import (
    Amount,
    BlockHash,
    Bool,
    Hash256,
    Hex,
    Int,
    JsonObject,
    Number,
    RpcModel,
    Str,
    Txid,
    json_kind,
)
from corerpc.types import blockchain, control, mining, network, rawtransactions, util, wallet, zmq

__all__ = [
    "Amount",
    "BlockHash",
    "Bool",
    "Hash256",
    "Hex",
    "Int",
    "JsonObject",
    "Number",
    "RpcModel",
    "Str",
    "Txid",
    "json_kind",
    "blockchain",
    "control",
    "mining",
    "network",
    "rawtransactions",
    "util",
    "wallet",
    "zmq",
]
