"""Response shapes for the ``== Rawtransactions ==`` section."""

from __future__ import annotations

from typing import Any, Union

from pydantic import Field

from corerpc.types.blockchain import ScriptPubKeyV17, ScriptPubKeyV22
from corerpc.types.primitives import (
    Amount,
    BlockHash,
    Bool,
    Hex,
    Int,
    JsonObject,
    RpcModel,
    Str,
    Txid,
)


class ScriptSig(RpcModel):
    asm: Str
    hex: Hex


class TxIn(RpcModel):
    """Coinbase inputs carry ``coinbase`` instead of an outpoint and scriptSig."""
    txid: Txid | None = None
    vout: Int | None = None
    coinbase: Hex | None = None
    script_sig: ScriptSig | None = Field(None, alias="scriptSig")
    txin_witness: list[Hex] | None = Field(None, alias="txinwitness")
    sequence: Int


class TxOutV17(RpcModel):
    value: Amount
    n: Int
    script_pubkey: ScriptPubKeyV17 = Field(alias="scriptPubKey")


class TxOutV22(TxOutV17):
    script_pubkey: ScriptPubKeyV22 = Field(alias="scriptPubKey")


class DecodeRawTransactionV17(RpcModel):
    txid: Txid
    hash: Txid
    size: Int
    vsize: Int
    weight: Int
    version: Int
    locktime: Int
    vin: list[TxIn]
    vout: list[TxOutV17]


class DecodeRawTransactionV22(DecodeRawTransactionV17):
    vout: list[TxOutV22]


DecodeRawTransaction = Union[DecodeRawTransactionV17, DecodeRawTransactionV22]


class GetRawTransactionVerboseV17(DecodeRawTransactionV17):
    """``getrawtransaction`` with verbose=true: the decoded tx plus chain context."""
    hex: Hex
    in_active_chain: Bool | None = None
    block_hash: BlockHash | None = Field(None, alias="blockhash")
    confirmations: Int | None = None
    time: Int | None = None
    block_time: Int | None = Field(None, alias="blocktime")


class GetRawTransactionVerboseV22(GetRawTransactionVerboseV17):
    vout: list[TxOutV22]


GetRawTransactionVerbose = Union[GetRawTransactionVerboseV17, GetRawTransactionVerboseV22]


class DecodeScript(RpcModel):
    asm: Str
    hex: Hex | None = None
    type: Str
    desc: Str | None = None
    req_sigs: Int | None = Field(None, alias="reqSigs")
    addresses: list[Str] | None = None
    address: Str | None = None
    p2sh: Str | None = None
    segwit: JsonObject | None = None


class MempoolAcceptFees(RpcModel):
    base: Amount


class MempoolAcceptResult(RpcModel):
    txid: Txid
    # v22+
    wtxid: Txid | None = None
    # absent when the package as a whole failed (v22+)
    allowed: Bool | None = None
    vsize: Int | None = None
    fees: MempoolAcceptFees | None = None
    reject_reason: Str | None = Field(None, alias="reject-reason")


class FundRawTransaction(RpcModel):
    hex: Hex
    fee: Amount
    change_position: Int = Field(alias="changepos")


class SignRawTransactionError(RpcModel):
    txid: Txid
    vout: Int
    script_sig: Hex = Field(alias="scriptSig")
    sequence: Int
    error: Str
    witness: list[Hex] | None = None


class SignRawTransaction(RpcModel):
    """Result of ``signrawtransactionwithkey`` and ``signrawtransactionwithwallet``."""
    hex: Hex
    complete: Bool
    errors: list[SignRawTransactionError] | None = None


# --- psbt -----------------------------------------------------------------


class WitnessUtxoV17(RpcModel):
    amount: Amount
    script_pubkey: ScriptPubKeyV17 = Field(alias="scriptPubKey")


class WitnessUtxoV22(RpcModel):
    amount: Amount
    script_pubkey: ScriptPubKeyV22 = Field(alias="scriptPubKey")


class PsbtScript(RpcModel):
    asm: Str
    hex: Hex
    type: Str


class PsbtOutput(RpcModel):
    redeem_script: PsbtScript | None = None
    witness_script: PsbtScript | None = None
    # an object keyed by pubkey on v17, a list of objects from v18 on
    bip32_derivs: Any = None
    unknown: dict[str, Hex] | None = None


class PsbtInputV17(RpcModel):
    non_witness_utxo: JsonObject | None = None
    witness_utxo: WitnessUtxoV17 | None = None
    partial_signatures: dict[str, Hex] | None = None
    sighash: Str | None = None
    redeem_script: PsbtScript | None = None
    witness_script: PsbtScript | None = None
    bip32_derivs: Any = None
    final_script_sig: ScriptSig | None = Field(None, alias="final_scriptSig")
    final_script_witness: list[Hex] | None = Field(None, alias="final_scriptwitness")
    unknown: dict[str, Hex] | None = None


class PsbtInputV22(PsbtInputV17):
    witness_utxo: WitnessUtxoV22 | None = None


class DecodePsbtV17(RpcModel):
    tx: DecodeRawTransactionV17
    unknown: dict[str, Hex]
    inputs: list[PsbtInputV17]
    outputs: list[PsbtOutput]
    # absent when an input lacks its utxo
    fee: Amount | None = None


class DecodePsbtV22(RpcModel):
    tx: DecodeRawTransactionV22
    # v23+
    global_xpubs: list[JsonObject] | None = None
    psbt_version: Int | None = None
    proprietary: list[JsonObject] | None = None
    unknown: dict[str, Hex]
    inputs: list[PsbtInputV22]
    outputs: list[PsbtOutput]
    fee: Amount | None = None


DecodePsbt = Union[DecodePsbtV17, DecodePsbtV22]


class FinalizePsbt(RpcModel):
    """``hex`` when complete and extracted, ``psbt`` otherwise."""
    psbt: Str | None = None
    hex: Hex | None = None
    complete: Bool


class AnalyzePsbtInputMissing(RpcModel):
    pubkeys: list[Hex] | None = None
    signatures: list[Hex] | None = None
    redeem_script: Hex | None = Field(None, alias="redeemscript")
    witness_script: Hex | None = Field(None, alias="witnessscript")


class AnalyzePsbtInput(RpcModel):
    has_utxo: Bool
    is_final: Bool
    missing: AnalyzePsbtInputMissing | None = None
    next: Str | None = None


class AnalyzePsbt(RpcModel):
    inputs: list[AnalyzePsbtInput] | None = None
    estimated_vsize: Int | None = None
    estimated_feerate: Amount | None = None
    fee: Amount | None = None
    next: Str
    # v22+
    error: Str | None = None
