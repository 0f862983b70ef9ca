"""``== Rawtransactions ==`` methods."""

from typing import Any

from corerpc.registry.descriptor import Const, MethodDescriptor, Param, between, since
from corerpc.types import rawtransactions as t
from corerpc.types.primitives import Amount, BlockHash, Bool, Hex, Int, JsonObject, Str, Txid

_CREATE_TRANSACTION = (
    Param("inputs", list[JsonObject], required=True),
    # object of address->amount, or an array of such objects
    Param("outputs", Any, required=True),
    Param("locktime", Int, default=0),
    Param("replaceable", Bool, default=False),
)

DESCRIPTORS = (
    MethodDescriptor(
        "getrawtransaction", since(17), Hex,
        params=(
            Param("txid", Txid, required=True),
            Const("verbose", False),
            Param("blockhash", BlockHash),
        ),
    ),
    MethodDescriptor(
        "getrawtransaction_verbose", between(17, 21), t.GetRawTransactionVerboseV17,
        params=(
            Param("txid", Txid, required=True),
            Const("verbose", True),
            Param("blockhash", BlockHash),
        ),
        rpc_method="getrawtransaction",
    ),
    MethodDescriptor(
        "getrawtransaction_verbose", since(22), t.GetRawTransactionVerboseV22,
        params=(
            Param("txid", Txid, required=True),
            Const("verbose", True),
            Param("blockhash", BlockHash),
        ),
        rpc_method="getrawtransaction",
    ),
    MethodDescriptor(
        "decoderawtransaction", between(17, 21), t.DecodeRawTransactionV17,
        params=(Param("hexstring", Hex, required=True), Param("iswitness", Bool)),
    ),
    MethodDescriptor(
        "decoderawtransaction", since(22), t.DecodeRawTransactionV22,
        params=(Param("hexstring", Hex, required=True), Param("iswitness", Bool)),
    ),
    MethodDescriptor(
        "decodescript", since(17), t.DecodeScript,
        params=(Param("hexstring", Hex, required=True),),
    ),
    MethodDescriptor(
        "sendrawtransaction", between(17, 18), Txid,
        params=(Param("hexstring", Hex, required=True), Param("allowhighfees", Bool, default=False)),
    ),
    MethodDescriptor(
        "sendrawtransaction", between(19, 24), Txid,
        params=(Param("hexstring", Hex, required=True), Param("maxfeerate", Amount, default="0.10")),
    ),
    MethodDescriptor(
        "sendrawtransaction", since(25), Txid,
        params=(
            Param("hexstring", Hex, required=True),
            Param("maxfeerate", Amount, default="0.10"),
            Param("maxburnamount", Amount, default="0"),
        ),
    ),
    MethodDescriptor(
        "testmempoolaccept", between(17, 18), list[t.MempoolAcceptResult],
        params=(Param("rawtxs", list[Hex], required=True), Param("allowhighfees", Bool, default=False)),
    ),
    MethodDescriptor(
        "testmempoolaccept", since(19), list[t.MempoolAcceptResult],
        params=(Param("rawtxs", list[Hex], required=True), Param("maxfeerate", Amount, default="0.10")),
    ),
    MethodDescriptor("createrawtransaction", since(17), Hex, params=_CREATE_TRANSACTION),
    MethodDescriptor(
        "combinerawtransaction", since(17), Hex,
        params=(Param("txs", list[Hex], required=True),),
    ),
    MethodDescriptor(
        "fundrawtransaction", since(17), t.FundRawTransaction,
        params=(
            Param("hexstring", Hex, required=True),
            Param("options", JsonObject),
            Param("iswitness", Bool),
        ),
    ),
    MethodDescriptor(
        "signrawtransactionwithkey", since(17), t.SignRawTransaction,
        params=(
            Param("hexstring", Hex, required=True),
            Param("privkeys", list[Str], required=True),
            Param("prevtxs", list[JsonObject], default=[]),
            Param("sighashtype", Str, default="ALL"),
        ),
    ),
    # PSBTs travel as base64 strings
    MethodDescriptor("createpsbt", since(17), Str, params=_CREATE_TRANSACTION),
    MethodDescriptor(
        "decodepsbt", between(17, 21), t.DecodePsbtV17,
        params=(Param("psbt", Str, required=True),),
    ),
    MethodDescriptor(
        "decodepsbt", since(22), t.DecodePsbtV22,
        params=(Param("psbt", Str, required=True),),
    ),
    MethodDescriptor(
        "combinepsbt", since(17), Str,
        params=(Param("txs", list[Str], required=True),),
    ),
    MethodDescriptor(
        "finalizepsbt", since(17), t.FinalizePsbt,
        params=(Param("psbt", Str, required=True), Param("extract", Bool, default=True)),
    ),
    MethodDescriptor(
        "converttopsbt", since(17), Str,
        params=(
            Param("hexstring", Hex, required=True),
            Param("permitsigdata", Bool, default=False),
            Param("iswitness", Bool),
        ),
    ),
    MethodDescriptor(
        "analyzepsbt", since(18), t.AnalyzePsbt,
        params=(Param("psbt", Str, required=True),),
    ),
    MethodDescriptor(
        "joinpsbts", since(18), Str,
        params=(Param("txs", list[Str], required=True),),
    ),
    MethodDescriptor(
        "utxoupdatepsbt", between(18, 18), Str,
        params=(Param("psbt", Str, required=True),),
    ),
    MethodDescriptor(
        "utxoupdatepsbt", since(19), Str,
        params=(Param("psbt", Str, required=True), Param("descriptors", list[Any], default=[])),
    ),
)
