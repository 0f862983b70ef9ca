"""``== Blockchain ==`` methods."""

from typing import Any, Optional

from corerpc.registry.descriptor import Const, MethodDescriptor, Param, between, since
from corerpc.types import blockchain as t
from corerpc.types.primitives import BlockHash, Bool, Hex, Int, JsonObject, Number, Str, Txid

DESCRIPTORS = (
    MethodDescriptor("getbestblockhash", since(17), BlockHash),
    MethodDescriptor("getblockcount", since(17), Int),
    MethodDescriptor(
        "getblockhash", since(17), BlockHash,
        params=(Param("height", Int, required=True),),
    ),
    MethodDescriptor(
        "getblock", since(17), t.GetBlockVerboseOne,
        params=(Param("blockhash", BlockHash, required=True), Const("verbosity", 1)),
    ),
    MethodDescriptor(
        "getblock_hex", since(17), Hex,
        params=(Param("blockhash", BlockHash, required=True), Const("verbosity", 0)),
        rpc_method="getblock",
    ),
    MethodDescriptor(
        "getblockheader", since(17), t.GetBlockHeaderVerbose,
        params=(Param("blockhash", BlockHash, required=True), Const("verbose", True)),
    ),
    MethodDescriptor(
        "getblockheader_hex", since(17), Hex,
        params=(Param("blockhash", BlockHash, required=True), Const("verbose", False)),
        rpc_method="getblockheader",
    ),
    MethodDescriptor("getblockchaininfo", between(17, 18), t.GetBlockchainInfoV17),
    MethodDescriptor("getblockchaininfo", between(19, 22), t.GetBlockchainInfoV19),
    MethodDescriptor("getblockchaininfo", between(23, 27), t.GetBlockchainInfoV23),
    MethodDescriptor("getblockchaininfo", since(28), t.GetBlockchainInfoV28),
    MethodDescriptor("getdifficulty", since(17), Number),
    MethodDescriptor("getchaintips", since(17), list[t.ChainTip]),
    MethodDescriptor(
        "getchaintxstats", since(17), t.GetChainTxStats,
        params=(Param("nblocks", Int), Param("blockhash", BlockHash)),
    ),
    MethodDescriptor("getmempoolinfo", between(17, 18), t.GetMempoolInfoV17),
    MethodDescriptor("getmempoolinfo", since(19), t.GetMempoolInfoV19),
    MethodDescriptor(
        "getmempoolentry", between(17, 18), t.MempoolEntryV17,
        params=(Param("txid", Txid, required=True),),
    ),
    MethodDescriptor(
        "getmempoolentry", since(19), t.MempoolEntryV19,
        params=(Param("txid", Txid, required=True),),
    ),
    MethodDescriptor(
        "getrawmempool", since(17), list[Txid],
        params=(Const("verbose", False),),
    ),
    MethodDescriptor(
        "getrawmempool_verbose", between(17, 18), t.MempoolEntriesV17,
        params=(Const("verbose", True),),
        rpc_method="getrawmempool",
    ),
    MethodDescriptor(
        "getrawmempool_verbose", since(19), t.MempoolEntriesV19,
        params=(Const("verbose", True),),
        rpc_method="getrawmempool",
    ),
    MethodDescriptor(
        "getmempoolancestors", since(17), list[Txid],
        params=(Param("txid", Txid, required=True), Const("verbose", False)),
    ),
    MethodDescriptor(
        "getmempoolancestors_verbose", between(17, 18), t.MempoolEntriesV17,
        params=(Param("txid", Txid, required=True), Const("verbose", True)),
        rpc_method="getmempoolancestors",
    ),
    MethodDescriptor(
        "getmempoolancestors_verbose", since(19), t.MempoolEntriesV19,
        params=(Param("txid", Txid, required=True), Const("verbose", True)),
        rpc_method="getmempoolancestors",
    ),
    MethodDescriptor(
        "getmempooldescendants", since(17), list[Txid],
        params=(Param("txid", Txid, required=True), Const("verbose", False)),
    ),
    MethodDescriptor(
        "getmempooldescendants_verbose", between(17, 18), t.MempoolEntriesV17,
        params=(Param("txid", Txid, required=True), Const("verbose", True)),
        rpc_method="getmempooldescendants",
    ),
    MethodDescriptor(
        "getmempooldescendants_verbose", since(19), t.MempoolEntriesV19,
        params=(Param("txid", Txid, required=True), Const("verbose", True)),
        rpc_method="getmempooldescendants",
    ),
    MethodDescriptor(
        "getblockstats", since(17), t.GetBlockStats,
        params=(
            # block hash or height
            Param("hash_or_height", Any, required=True),
            Param("stats", list[Str], default=[]),
        ),
    ),
    MethodDescriptor(
        "gettxoutproof", since(17), Hex,
        params=(Param("txids", list[Txid], required=True), Param("blockhash", BlockHash)),
    ),
    MethodDescriptor(
        "verifytxoutproof", since(17), list[Txid],
        params=(Param("proof", Hex, required=True),),
    ),
    # null when the output is spent or unknown
    MethodDescriptor(
        "gettxout", between(17, 21), Optional[t.GetTxOutV17],
        params=(
            Param("txid", Txid, required=True),
            Param("n", Int, required=True),
            Param("include_mempool", Bool, default=True),
        ),
    ),
    MethodDescriptor(
        "gettxout", since(22), Optional[t.GetTxOutV22],
        params=(
            Param("txid", Txid, required=True),
            Param("n", Int, required=True),
            Param("include_mempool", Bool, default=True),
        ),
    ),
    MethodDescriptor("gettxoutsetinfo", between(17, 21), t.GetTxOutSetInfoV17),
    MethodDescriptor(
        "gettxoutsetinfo", between(22, 25), t.GetTxOutSetInfoV22,
        params=(
            Param("hash_type", Str, default="hash_serialized_2"),
            Param("hash_or_height", Any),
            Param("use_index", Bool, default=True),
        ),
    ),
    MethodDescriptor(
        "gettxoutsetinfo", since(26), t.GetTxOutSetInfoV26,
        params=(
            Param("hash_type", Str, default="hash_serialized_3"),
            Param("hash_or_height", Any),
            Param("use_index", Bool, default=True),
        ),
    ),
    MethodDescriptor(
        "dumptxoutset", between(20, 25), t.DumpTxOutSetV20,
        params=(Param("path", Str, required=True),),
    ),
    MethodDescriptor(
        "dumptxoutset", between(26, 27), t.DumpTxOutSetV26,
        params=(Param("path", Str, required=True),),
    ),
    MethodDescriptor(
        "dumptxoutset", since(28), t.DumpTxOutSetV26,
        params=(
            Param("path", Str, required=True),
            Param("type", Str, default=""),
            Param("options", JsonObject),
        ),
    ),
    MethodDescriptor(
        "verifychain", since(17), Bool,
        params=(Param("checklevel", Int, default=3), Param("nblocks", Int, default=6)),
    ),
    MethodDescriptor(
        "pruneblockchain", since(17), Int,
        params=(Param("height", Int, required=True),),
    ),
    MethodDescriptor("savemempool", between(17, 22), None),
    MethodDescriptor("savemempool", since(23), t.SaveMempool),
    MethodDescriptor(
        "preciousblock", since(17), None,
        params=(Param("blockhash", BlockHash, required=True),),
    ),
    MethodDescriptor(
        "getblockfilter", since(19), t.GetBlockFilter,
        params=(Param("blockhash", BlockHash, required=True), Param("filtertype", Str, default="basic")),
    ),
)
