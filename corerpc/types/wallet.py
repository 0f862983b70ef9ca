"""Response shapes for the ``== Wallet ==`` section."""

from __future__ import annotations

from typing import Union

from pydantic import Field

from corerpc.types.primitives import (
    Amount,
    BlockHash,
    Bool,
    Hex,
    Int,
    JsonObject,
    Number,
    RpcModel,
    Str,
    Txid,
)


# --- balances -------------------------------------------------------------


class BalanceDetails(RpcModel):
    trusted: Amount
    untrusted_pending: Amount
    immature: Amount
    # only with avoid_reuse wallets
    used: Amount | None = None


class LastProcessedBlock(RpcModel):
    hash: BlockHash
    height: Int


class GetBalances(RpcModel):
    mine: BalanceDetails
    watchonly: BalanceDetails | None = None
    # v26+
    last_processed_block: LastProcessedBlock | None = Field(None, alias="lastprocessedblock")


# --- wallet state ---------------------------------------------------------


class ScanningDetails(RpcModel):
    duration: Int
    progress: Number


class GetWalletInfo(RpcModel):
    """``scanning`` is ``false`` when idle and an object while a rescan runs."""
    wallet_name: Str = Field(alias="walletname")
    wallet_version: Int = Field(alias="walletversion")
    balance: Amount | None = None
    unconfirmed_balance: Amount | None = None
    immature_balance: Amount | None = None
    tx_count: Int = Field(alias="txcount")
    keypool_oldest: Int | None = Field(None, alias="keypoololdest")
    keypool_size: Int | None = Field(None, alias="keypoolsize")
    keypool_size_hd_internal: Int | None = Field(None, alias="keypoolsize_hd_internal")
    unlocked_until: Int | None = None
    pay_tx_fee: Amount = Field(alias="paytxfee")
    hd_seed_id: Str | None = Field(None, alias="hdseedid")
    private_keys_enabled: Bool
    # v19+
    avoid_reuse: Bool | None = None
    scanning: Bool | ScanningDetails | None = None
    # v21+
    format: Str | None = None
    descriptors: Bool | None = None
    # v23+
    external_signer: Bool | None = None
    # v26+
    last_processed_block: LastProcessedBlock | None = Field(None, alias="lastprocessedblock")


class CreateWalletV17(RpcModel):
    name: Str
    warning: Str


class CreateWalletV25(RpcModel):
    name: Str
    warnings: list[Str] | None = None


CreateWallet = Union[CreateWalletV17, CreateWalletV25]
LoadWalletV17 = CreateWalletV17
LoadWalletV25 = CreateWalletV25
LoadWallet = CreateWallet


class UnloadWalletV21(RpcModel):
    warning: Str


class UnloadWalletV25(RpcModel):
    warnings: list[Str] | None = None


UnloadWallet = Union[UnloadWalletV21, UnloadWalletV25]


class UpgradeWallet(RpcModel):
    wallet_name: Str
    previous_version: Int
    current_version: Int
    result: Str | None = None
    error: Str | None = None


# --- coins and history ----------------------------------------------------


class UnspentOutput(RpcModel):
    txid: Txid
    vout: Int
    address: Str | None = None
    label: Str | None = None
    script_pubkey: Hex = Field(alias="scriptPubKey")
    amount: Amount
    confirmations: Int
    redeem_script: Hex | None = Field(None, alias="redeemScript")
    witness_script: Hex | None = Field(None, alias="witnessScript")
    spendable: Bool
    solvable: Bool
    desc: Str | None = None
    # v19+
    reused: Bool | None = None
    safe: Bool


class LockedOutput(RpcModel):
    txid: Txid
    vout: Int


class TransactionDetail(RpcModel):
    involves_watch_only: Bool | None = Field(None, alias="involvesWatchonly")
    address: Str | None = None
    category: Str
    amount: Amount
    label: Str | None = None
    vout: Int
    fee: Amount | None = None
    abandoned: Bool | None = None


class GetTransaction(RpcModel):
    amount: Amount
    fee: Amount | None = None
    confirmations: Int
    generated: Bool | None = None
    trusted: Bool | None = None
    block_hash: BlockHash | None = Field(None, alias="blockhash")
    block_height: Int | None = Field(None, alias="blockheight")
    block_index: Int | None = Field(None, alias="blockindex")
    block_time: Int | None = Field(None, alias="blocktime")
    txid: Txid
    wallet_conflicts: list[Txid] = Field(alias="walletconflicts")
    time: Int
    time_received: Int = Field(alias="timereceived")
    comment: Str | None = None
    bip125_replaceable: Str | None = Field(None, alias="bip125-replaceable")
    details: list[TransactionDetail]
    hex: Hex
    # v19+ with verbose=true
    decoded: JsonObject | None = None


class ListTransactionsItem(RpcModel):
    involves_watch_only: Bool | None = Field(None, alias="involvesWatchonly")
    address: Str | None = None
    category: Str
    amount: Amount
    label: Str | None = None
    vout: Int
    fee: Amount | None = None
    confirmations: Int
    generated: Bool | None = None
    trusted: Bool | None = None
    block_hash: BlockHash | None = Field(None, alias="blockhash")
    block_height: Int | None = Field(None, alias="blockheight")
    block_index: Int | None = Field(None, alias="blockindex")
    block_time: Int | None = Field(None, alias="blocktime")
    txid: Txid
    wallet_conflicts: list[Txid] = Field(alias="walletconflicts")
    time: Int
    time_received: Int = Field(alias="timereceived")
    comment: Str | None = None
    bip125_replaceable: Str | None = Field(None, alias="bip125-replaceable")
    abandoned: Bool | None = None


# --- addresses ------------------------------------------------------------


class AddressLabel(RpcModel):
    name: Str
    purpose: Str


class _AddressInfoBase(RpcModel):
    address: Str
    script_pubkey: Hex = Field(alias="scriptPubKey")
    is_mine: Bool = Field(alias="ismine")
    is_watch_only: Bool = Field(alias="iswatchonly")
    solvable: Bool | None = None
    desc: Str | None = None
    is_script: Bool = Field(alias="isscript")
    is_change: Bool | None = Field(None, alias="ischange")
    is_witness: Bool = Field(alias="iswitness")
    witness_version: Int | None = None
    witness_program: Hex | None = None
    script: Str | None = None
    hex: Hex | None = None
    pubkeys: list[Hex] | None = None
    sigs_required: Int | None = Field(None, alias="sigsrequired")
    pubkey: Hex | None = None
    is_compressed: Bool | None = Field(None, alias="iscompressed")
    timestamp: Int | None = None
    hd_key_path: Str | None = Field(None, alias="hdkeypath")
    hd_seed_id: Str | None = Field(None, alias="hdseedid")
    hd_master_fingerprint: Str | None = Field(None, alias="hdmasterfingerprint")


class GetAddressInfoV17(_AddressInfoBase):
    label: Str | None = None
    labels: list[AddressLabel]


class GetAddressInfoV20(_AddressInfoBase):
    labels: list[Str]


GetAddressInfo = Union[GetAddressInfoV17, GetAddressInfoV20]


class AddressPurpose(RpcModel):
    purpose: Str


# --- spending -------------------------------------------------------------


class SendManyVerbose(RpcModel):
    txid: Txid
    fee_reason: Str


class BumpFee(RpcModel):
    txid: Txid
    original_fee: Amount = Field(alias="origfee")
    fee: Amount
    errors: list[Str]


class PsbtBumpFee(RpcModel):
    psbt: Str
    original_fee: Amount = Field(alias="origfee")
    fee: Amount
    errors: list[Str]


class Send(RpcModel):
    """``txid``/``hex`` only when complete; ``psbt`` when not broadcast."""
    complete: Bool
    txid: Txid | None = None
    hex: Hex | None = None
    psbt: Str | None = None


class ImportDescriptorsError(RpcModel):
    code: Int
    message: Str


class ImportDescriptorsResult(RpcModel):
    success: Bool
    warnings: list[Str] | None = None
    error: ImportDescriptorsError | None = None


class RescanBlockchain(RpcModel):
    start_height: Int
    stop_height: Int | None = None


class WalletProcessPsbt(RpcModel):
    psbt: Str
    complete: Bool
    # v26+
    hex: Hex | None = None


class WalletCreateFundedPsbt(RpcModel):
    psbt: Str
    fee: Amount
    change_position: Int = Field(alias="changepos")


# --- history and grouping -------------------------------------------------


class ListSinceBlock(RpcModel):
    """Entries share the ``listtransactions`` layout."""
    transactions: list[ListTransactionsItem]
    # only with include_removed
    removed: list[ListTransactionsItem] | None = None
    last_block: BlockHash = Field(alias="lastblock")


class ListReceivedByAddressItem(RpcModel):
    involves_watch_only: Bool | None = Field(None, alias="involvesWatchonly")
    address: Str
    amount: Amount
    confirmations: Int
    label: Str
    txids: list[Txid]


# [address, amount] or [address, amount, label]
AddressGrouping = Union[tuple[Str, Amount, Str], tuple[Str, Amount]]


class AddMultisigAddress(RpcModel):
    address: Str
    redeem_script: Hex = Field(alias="redeemScript")
    # v20+
    descriptor: Str | None = None
    # v23+, legacy wallets only
    warnings: list[Str] | None = None
