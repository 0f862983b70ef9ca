"""``== Wallet ==`` methods.

Calls that need a specific wallet go to the transport's wallet endpoint;
the descriptors only describe arguments and results.
"""

from typing import Any

from corerpc.registry.descriptor import Const, MethodDescriptor, Param, between, since
from corerpc.types import rawtransactions as raw
from corerpc.types import wallet as t
from corerpc.types.primitives import Amount, BlockHash, Bool, Hex, Int, JsonObject, Str, Txid

_GET_BALANCE_V17 = (
    Param("dummy", Str, default="*"),
    Param("minconf", Int, default=0),
    Param("include_watchonly", Bool, default=False),
)

_SEND_TO_ADDRESS_V17 = (
    Param("address", Str, required=True),
    Param("amount", Amount, required=True),
    Param("comment", Str, default=""),
    Param("comment_to", Str, default=""),
    Param("subtractfeefromamount", Bool, default=False),
    Param("replaceable", Bool),
    Param("conf_target", Int),
    Param("estimate_mode", Str, default="UNSET"),
)
_SEND_TO_ADDRESS_V19 = _SEND_TO_ADDRESS_V17 + (Param("avoid_reuse", Bool, default=True),)
_SEND_TO_ADDRESS_V21 = _SEND_TO_ADDRESS_V19 + (Param("fee_rate", Amount),)

_SEND_MANY_V17 = (
    Param("dummy", Str, default=""),
    Param("amounts", JsonObject, required=True),
    Param("minconf", Int, default=1),
    Param("comment", Str, default=""),
    Param("subtractfeefrom", list[Str], default=[]),
    Param("replaceable", Bool),
    Param("conf_target", Int),
    Param("estimate_mode", Str, default="UNSET"),
)
_SEND_MANY_V21 = _SEND_MANY_V17 + (Param("fee_rate", Amount),)

_CREATE_WALLET_V17 = (
    Param("wallet_name", Str, required=True),
    Param("disable_private_keys", Bool, default=False),
)
_CREATE_WALLET_V18 = _CREATE_WALLET_V17 + (Param("blank", Bool, default=False),)
_CREATE_WALLET_V19 = _CREATE_WALLET_V18 + (
    Param("passphrase", Str, default=""),
    Param("avoid_reuse", Bool, default=False),
)
_CREATE_WALLET_V21 = _CREATE_WALLET_V19 + (
    Param("descriptors", Bool),
    Param("load_on_startup", Bool),
)
_CREATE_WALLET_V22 = _CREATE_WALLET_V21 + (Param("external_signer", Bool, default=False),)

_LIST_SINCE_BLOCK_V17 = (
    Param("blockhash", BlockHash),
    Param("target_confirmations", Int, default=1),
    Param("include_watchonly", Bool, default=False),
    Param("include_removed", Bool, default=True),
)

_LIST_RECEIVED_BY_ADDRESS_V17 = (
    Param("minconf", Int, default=1),
    Param("include_empty", Bool, default=False),
    Param("include_watchonly", Bool, default=False),
)
_LIST_RECEIVED_BY_ADDRESS_V18 = _LIST_RECEIVED_BY_ADDRESS_V17 + (Param("address_filter", Str),)

_LOAD_WALLET_V21 = (Param("filename", Str, required=True), Param("load_on_startup", Bool))
_UNLOAD_WALLET_V21 = (Param("wallet_name", Str), Param("load_on_startup", Bool))

DESCRIPTORS = (
    MethodDescriptor("getbalance", between(17, 18), Amount, params=_GET_BALANCE_V17),
    MethodDescriptor(
        "getbalance", since(19), Amount,
        params=_GET_BALANCE_V17 + (Param("avoid_reuse", Bool, default=True),),
    ),
    MethodDescriptor("getbalances", since(19), t.GetBalances),
    MethodDescriptor(
        "getnewaddress", since(17), Str,
        params=(Param("label", Str, default=""), Param("address_type", Str)),
    ),
    MethodDescriptor("getrawchangeaddress", since(17), Str, params=(Param("address_type", Str),)),
    MethodDescriptor("getwalletinfo", since(17), t.GetWalletInfo),
    MethodDescriptor(
        "listunspent", since(17), list[t.UnspentOutput],
        params=(
            Param("minconf", Int, default=1),
            Param("maxconf", Int, default=9999999),
            Param("addresses", list[Str], default=[]),
            Param("include_unsafe", Bool, default=True),
            Param("query_options", JsonObject),
        ),
    ),
    MethodDescriptor(
        "gettransaction", between(17, 18), t.GetTransaction,
        params=(Param("txid", Txid, required=True), Param("include_watchonly", Bool, default=False)),
    ),
    MethodDescriptor(
        "gettransaction", since(19), t.GetTransaction,
        params=(
            Param("txid", Txid, required=True),
            Param("include_watchonly", Bool, default=False),
            Param("verbose", Bool, default=False),
        ),
    ),
    MethodDescriptor(
        "listtransactions", since(17), list[t.ListTransactionsItem],
        params=(
            Param("label", Str, default="*"),
            Param("count", Int, default=10),
            Param("skip", Int, default=0),
            Param("include_watchonly", Bool, default=False),
        ),
    ),
    MethodDescriptor("sendtoaddress", between(17, 18), Txid, params=_SEND_TO_ADDRESS_V17),
    MethodDescriptor("sendtoaddress", between(19, 20), Txid, params=_SEND_TO_ADDRESS_V19),
    MethodDescriptor("sendtoaddress", since(21), Txid, params=_SEND_TO_ADDRESS_V21),
    MethodDescriptor("sendmany", between(17, 20), Txid, params=_SEND_MANY_V17),
    MethodDescriptor("sendmany", since(21), Txid, params=_SEND_MANY_V21),
    MethodDescriptor(
        "sendmany_verbose", since(21), t.SendManyVerbose,
        params=_SEND_MANY_V21 + (Const("verbose", True),),
        rpc_method="sendmany",
    ),
    MethodDescriptor("createwallet", between(17, 17), t.CreateWalletV17, params=_CREATE_WALLET_V17),
    MethodDescriptor("createwallet", between(18, 18), t.CreateWalletV17, params=_CREATE_WALLET_V18),
    MethodDescriptor("createwallet", between(19, 20), t.CreateWalletV17, params=_CREATE_WALLET_V19),
    MethodDescriptor("createwallet", between(21, 21), t.CreateWalletV17, params=_CREATE_WALLET_V21),
    MethodDescriptor("createwallet", between(22, 24), t.CreateWalletV17, params=_CREATE_WALLET_V22),
    MethodDescriptor("createwallet", since(25), t.CreateWalletV25, params=_CREATE_WALLET_V22),
    MethodDescriptor(
        "loadwallet", between(17, 20), t.LoadWalletV17,
        params=(Param("filename", Str, required=True),),
    ),
    MethodDescriptor("loadwallet", between(21, 24), t.LoadWalletV17, params=_LOAD_WALLET_V21),
    MethodDescriptor("loadwallet", since(25), t.LoadWalletV25, params=_LOAD_WALLET_V21),
    MethodDescriptor("unloadwallet", between(17, 20), None, params=(Param("wallet_name", Str),)),
    MethodDescriptor("unloadwallet", between(21, 24), t.UnloadWalletV21, params=_UNLOAD_WALLET_V21),
    MethodDescriptor("unloadwallet", since(25), t.UnloadWalletV25, params=_UNLOAD_WALLET_V21),
    MethodDescriptor("listwallets", since(17), list[Str]),
    MethodDescriptor(
        "walletpassphrase", since(17), None,
        params=(Param("passphrase", Str, required=True), Param("timeout", Int, required=True)),
    ),
    MethodDescriptor("walletlock", since(17), None),
    MethodDescriptor(
        "encryptwallet", since(17), Str,
        params=(Param("passphrase", Str, required=True),),
    ),
    MethodDescriptor(
        "signmessage", since(17), Str,
        params=(Param("address", Str, required=True), Param("message", Str, required=True)),
    ),
    MethodDescriptor(
        "lockunspent", since(17), Bool,
        params=(Param("unlock", Bool, required=True), Param("transactions", list[JsonObject], default=[])),
    ),
    MethodDescriptor("settxfee", since(17), Bool, params=(Param("amount", Amount, required=True),)),
    MethodDescriptor("dumpprivkey", since(17), Str, params=(Param("address", Str, required=True),)),
    MethodDescriptor(
        "getaddressinfo", between(17, 19), t.GetAddressInfoV17,
        params=(Param("address", Str, required=True),),
    ),
    MethodDescriptor(
        "getaddressinfo", since(20), t.GetAddressInfoV20,
        params=(Param("address", Str, required=True),),
    ),
    MethodDescriptor(
        "importdescriptors", since(21), list[t.ImportDescriptorsResult],
        params=(Param("requests", list[JsonObject], required=True),),
    ),
    MethodDescriptor(
        "psbtbumpfee", since(21), t.PsbtBumpFee,
        params=(Param("txid", Txid, required=True), Param("options", JsonObject)),
    ),
    MethodDescriptor(
        "send", since(21), t.Send,
        params=(
            Param("outputs", Any, required=True),
            Param("conf_target", Int),
            Param("estimate_mode", Str, default="unset"),
            Param("fee_rate", Amount),
            Param("options", JsonObject),
        ),
    ),
    MethodDescriptor("upgradewallet", since(21), t.UpgradeWallet, params=(Param("version", Int),)),
    MethodDescriptor(
        "bumpfee", since(17), t.BumpFee,
        params=(Param("txid", Txid, required=True), Param("options", JsonObject)),
    ),
    MethodDescriptor(
        "getreceivedbyaddress", since(17), Amount,
        params=(Param("address", Str, required=True), Param("minconf", Int, default=1)),
    ),
    MethodDescriptor("listlabels", since(17), list[Str], params=(Param("purpose", Str),)),
    MethodDescriptor(
        "abandontransaction", since(17), None,
        params=(Param("txid", Txid, required=True),),
    ),
    MethodDescriptor(
        "backupwallet", since(17), None,
        params=(Param("destination", Str, required=True),),
    ),
    MethodDescriptor("keypoolrefill", since(17), None, params=(Param("newsize", Int),)),
    MethodDescriptor("getunconfirmedbalance", since(17), Amount),
    MethodDescriptor(
        "rescanblockchain", since(17), t.RescanBlockchain,
        params=(Param("start_height", Int, default=0), Param("stop_height", Int)),
    ),
    MethodDescriptor(
        "walletprocesspsbt", since(17), t.WalletProcessPsbt,
        params=(
            Param("psbt", Str, required=True),
            Param("sign", Bool, default=True),
            Param("sighashtype", Str, default="ALL"),
            Param("bip32derivs", Bool, default=True),
        ),
    ),
    MethodDescriptor(
        "walletcreatefundedpsbt", since(17), t.WalletCreateFundedPsbt,
        params=(
            Param("inputs", list[JsonObject], required=True),
            Param("outputs", Any, required=True),
            Param("locktime", Int, default=0),
            Param("options", JsonObject),
            Param("bip32derivs", Bool, default=True),
        ),
    ),
    MethodDescriptor("listlockunspent", since(17), list[t.LockedOutput]),
    MethodDescriptor(
        "getaddressesbylabel", since(17), dict[str, t.AddressPurpose],
        params=(Param("label", Str, required=True),),
    ),
    MethodDescriptor("listsinceblock", between(17, 23), t.ListSinceBlock, params=_LIST_SINCE_BLOCK_V17),
    MethodDescriptor(
        "listsinceblock", since(24), t.ListSinceBlock,
        params=_LIST_SINCE_BLOCK_V17 + (Param("include_change", Bool, default=False),),
    ),
    MethodDescriptor(
        "listreceivedbyaddress", between(17, 17), list[t.ListReceivedByAddressItem],
        params=_LIST_RECEIVED_BY_ADDRESS_V17,
    ),
    MethodDescriptor(
        "listreceivedbyaddress", between(18, 24), list[t.ListReceivedByAddressItem],
        params=_LIST_RECEIVED_BY_ADDRESS_V18,
    ),
    MethodDescriptor(
        "listreceivedbyaddress", since(25), list[t.ListReceivedByAddressItem],
        params=_LIST_RECEIVED_BY_ADDRESS_V18 + (Param("include_immature_coinbase", Bool, default=False),),
    ),
    MethodDescriptor("listaddressgroupings", since(17), list[list[t.AddressGrouping]]),
    MethodDescriptor(
        "addmultisigaddress", since(17), t.AddMultisigAddress,
        params=(
            Param("nrequired", Int, required=True),
            Param("keys", list[Str], required=True),
            Param("label", Str, default=""),
            Param("address_type", Str),
        ),
    ),
    MethodDescriptor(
        "signrawtransactionwithwallet", since(17), raw.SignRawTransaction,
        params=(
            Param("hexstring", Hex, required=True),
            Param("prevtxs", list[JsonObject], default=[]),
            Param("sighashtype", Str, default="ALL"),
        ),
    ),
)
