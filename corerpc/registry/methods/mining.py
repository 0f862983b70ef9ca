"""``== Mining ==`` and ``== Generating ==`` methods."""

from typing import Optional

from corerpc.registry.descriptor import MethodDescriptor, Param, between, since
from corerpc.types import mining as t
from corerpc.types.primitives import Amount, BlockHash, Bool, Hex, Int, JsonObject, Number, Str, Txid

DESCRIPTORS = (
    MethodDescriptor(
        "getblocktemplate", since(17), t.GetBlockTemplate,
        # the daemon refuses a template request without the segwit rule
        params=(Param("template_request", JsonObject, default={"rules": ["segwit"]}),),
    ),
    MethodDescriptor("getmininginfo", between(17, 27), t.GetMiningInfoV17),
    MethodDescriptor("getmininginfo", since(28), t.GetMiningInfoV28),
    MethodDescriptor(
        "getnetworkhashps", since(17), Number,
        params=(Param("nblocks", Int, default=120), Param("height", Int, default=-1)),
    ),
    MethodDescriptor(
        "generatetoaddress", since(17), list[BlockHash],
        params=(
            Param("nblocks", Int, required=True),
            Param("address", Str, required=True),
            Param("maxtries", Int),
        ),
    ),
    MethodDescriptor(
        "generatetodescriptor", since(20), list[BlockHash],
        params=(
            Param("num_blocks", Int, required=True),
            Param("descriptor", Str, required=True),
            Param("maxtries", Int),
        ),
    ),
    MethodDescriptor(
        "generateblock", between(22, 24), t.GenerateBlock,
        params=(Param("output", Str, required=True), Param("transactions", list[Str], required=True)),
    ),
    MethodDescriptor(
        "generateblock", since(25), t.GenerateBlock,
        params=(
            Param("output", Str, required=True),
            Param("transactions", list[Str], required=True),
            Param("submit", Bool, default=True),
        ),
    ),
    # null on acceptance, otherwise a rejection reason
    MethodDescriptor(
        "submitblock", since(17), Optional[Str],
        params=(Param("hexdata", Hex, required=True),),
    ),
    MethodDescriptor(
        "prioritisetransaction", since(17), Bool,
        params=(
            Param("txid", Txid, required=True),
            Param("dummy", Amount),
            Param("fee_delta", Int, required=True),
        ),
    ),
)
