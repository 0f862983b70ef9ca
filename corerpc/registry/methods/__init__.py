"""Descriptor tables, one module per daemon API section."""

from corerpc.registry.methods import (
    blockchain,
    control,
    mining,
    network,
    rawtransactions,
    util,
    wallet,
    zmq,
)

SECTIONS = {
    "blockchain": blockchain.DESCRIPTORS,
    "control": control.DESCRIPTORS,
    "network": network.DESCRIPTORS,
    "mining": mining.DESCRIPTORS,
    "rawtransactions": rawtransactions.DESCRIPTORS,
    "util": util.DESCRIPTORS,
    "wallet": wallet.DESCRIPTORS,
    "zmq": zmq.DESCRIPTORS,
}

ALL_DESCRIPTORS = tuple(d for descriptors in SECTIONS.values() for d in descriptors)

__all__ = ["SECTIONS", "ALL_DESCRIPTORS"]
