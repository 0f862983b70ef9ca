"""``== Util ==`` methods."""

from typing import Any

from corerpc.registry.descriptor import MethodDescriptor, Param, between, since
from corerpc.types import util as t
from corerpc.types.primitives import Bool, Int, Str

DESCRIPTORS = (
    MethodDescriptor(
        "estimatesmartfee", since(17), t.EstimateSmartFee,
        params=(Param("conf_target", Int, required=True), Param("estimate_mode", Str, default="CONSERVATIVE")),
    ),
    MethodDescriptor(
        "validateaddress", since(17), t.ValidateAddress,
        params=(Param("address", Str, required=True),),
    ),
    MethodDescriptor(
        "getdescriptorinfo", since(18), t.GetDescriptorInfo,
        params=(Param("descriptor", Str, required=True),),
    ),
    MethodDescriptor(
        "deriveaddresses", since(18), list[Str],
        params=(Param("descriptor", Str, required=True), Param("range", Any)),
    ),
    MethodDescriptor(
        "verifymessage", since(17), Bool,
        params=(
            Param("address", Str, required=True),
            Param("signature", Str, required=True),
            Param("message", Str, required=True),
        ),
    ),
    MethodDescriptor(
        "createmultisig", between(17, 19), t.CreateMultisigV17,
        params=(
            Param("nrequired", Int, required=True),
            Param("keys", list[Str], required=True),
            Param("address_type", Str, default="legacy"),
        ),
    ),
    MethodDescriptor(
        "createmultisig", since(20), t.CreateMultisigV20,
        params=(
            Param("nrequired", Int, required=True),
            Param("keys", list[Str], required=True),
            Param("address_type", Str, default="legacy"),
        ),
    ),
    MethodDescriptor(
        "signmessagewithprivkey", since(17), Str,
        params=(Param("privkey", Str, required=True), Param("message", Str, required=True)),
    ),
    MethodDescriptor(
        "getindexinfo", since(21), dict[str, t.IndexInfo],
        params=(Param("index_name", Str),),
    ),
)
