"""Response shapes for the ``== Blockchain ==`` section.

Class suffixes name the first daemon version the shape applies to; the
registry decides the exact range.
"""

from __future__ import annotations

from typing import Union

from pydantic import Field

from corerpc.types.primitives import (
    Amount,
    BlockHash,
    Bool,
    Hex,
    Int,
    Number,
    RpcModel,
    Str,
    Txid,
)


class GetBlockVerboseOne(RpcModel):
    """``getblock`` with verbosity 1: header fields plus the list of txids."""
    hash: BlockHash
    confirmations: Int
    size: Int
    stripped_size: Int | None = Field(None, alias="strippedsize")
    weight: Int
    height: Int
    version: Int
    version_hex: Str = Field(alias="versionHex")
    merkle_root: Str = Field(alias="merkleroot")
    tx: list[Txid]
    time: Int
    median_time: Int | None = Field(None, alias="mediantime")
    nonce: Int
    bits: Str
    difficulty: Number
    chainwork: Hex
    n_tx: Int = Field(alias="nTx")
    previous_block_hash: BlockHash | None = Field(None, alias="previousblockhash")
    next_block_hash: BlockHash | None = Field(None, alias="nextblockhash")
    # v29+
    target: Hex | None = None


class GetBlockHeaderVerbose(RpcModel):
    hash: BlockHash
    confirmations: Int
    height: Int
    version: Int
    version_hex: Str = Field(alias="versionHex")
    merkle_root: Str = Field(alias="merkleroot")
    time: Int
    median_time: Int = Field(alias="mediantime")
    nonce: Int
    bits: Str
    difficulty: Number
    chainwork: Hex
    n_tx: Int = Field(alias="nTx")
    previous_block_hash: BlockHash | None = Field(None, alias="previousblockhash")
    next_block_hash: BlockHash | None = Field(None, alias="nextblockhash")
    target: Hex | None = None


# --- getblockchaininfo ----------------------------------------------------


class SoftforkReject(RpcModel):
    status: Bool


class BuriedSoftforkV17(RpcModel):
    """Entry of the v17/v18 ``softforks`` array (BIP34/66/65)."""
    id: Str
    version: Int
    reject: SoftforkReject


class Bip9Statistics(RpcModel):
    period: Int
    threshold: Int | None = None
    elapsed: Int
    count: Int
    possible: Bool | None = None


class Bip9SoftforkV17(RpcModel):
    """Value of the v17/v18 ``bip9_softforks`` map."""
    status: Str
    bit: Int | None = None
    start_time: Int = Field(alias="startTime")
    timeout: Int
    since: Int
    statistics: Bip9Statistics | None = None


class Bip9SoftforkInfo(RpcModel):
    status: Str
    bit: Int | None = None
    start_time: Int
    timeout: Int
    since: Int
    # v21+
    min_activation_height: Int | None = None
    statistics: Bip9Statistics | None = None


class Softfork(RpcModel):
    """Value of the v19-v22 ``softforks`` map."""
    type: Str
    bip9: Bip9SoftforkInfo | None = None
    height: Int | None = None
    active: Bool


class _BlockchainInfoBase(RpcModel):
    chain: Str
    blocks: Int
    headers: Int
    best_block_hash: BlockHash = Field(alias="bestblockhash")
    difficulty: Number
    median_time: Int = Field(alias="mediantime")
    verification_progress: Number = Field(alias="verificationprogress")
    initial_block_download: Bool = Field(alias="initialblockdownload")
    chainwork: Hex
    size_on_disk: Int
    pruned: Bool
    prune_height: Int | None = Field(None, alias="pruneheight")
    automatic_pruning: Bool | None = None
    prune_target_size: Int | None = None


class GetBlockchainInfoV17(_BlockchainInfoBase):
    softforks: list[BuriedSoftforkV17]
    bip9_softforks: dict[str, Bip9SoftforkV17]
    warnings: Str


class GetBlockchainInfoV19(_BlockchainInfoBase):
    softforks: dict[str, Softfork]
    warnings: Str


class GetBlockchainInfoV23(_BlockchainInfoBase):
    """Softforks moved to ``getdeploymentinfo``; ``time`` added."""
    time: Int
    warnings: Str


class GetBlockchainInfoV28(_BlockchainInfoBase):
    time: Int
    warnings: list[Str]
    # v29+
    bits: Str | None = None
    target: Hex | None = None


GetBlockchainInfo = Union[
    GetBlockchainInfoV17, GetBlockchainInfoV19, GetBlockchainInfoV23, GetBlockchainInfoV28
]


class ChainTip(RpcModel):
    height: Int
    hash: BlockHash
    branch_len: Int = Field(alias="branchlen")
    status: Str


class GetChainTxStats(RpcModel):
    time: Int
    tx_count: Int = Field(alias="txcount")
    window_final_block_hash: BlockHash
    window_final_block_height: Int | None = None
    window_block_count: Int
    window_tx_count: Int | None = None
    window_interval: Int | None = None
    tx_rate: Number | None = Field(None, alias="txrate")


class GetBlockStats(RpcModel):
    """
    Per-block statistics. Fee figures are in satoshis, feerates in sat/vB.

    Every field is optional because the ``stats`` argument selects which
    ones the daemon computes.
    """
    avg_fee: Int | None = Field(None, alias="avgfee")
    avg_fee_rate: Int | None = Field(None, alias="avgfeerate")
    avg_tx_size: Int | None = Field(None, alias="avgtxsize")
    block_hash: BlockHash | None = Field(None, alias="blockhash")
    fee_rate_percentiles: list[Int] | None = Field(None, alias="feerate_percentiles")
    height: Int | None = None
    inputs: Int | None = Field(None, alias="ins")
    max_fee: Int | None = Field(None, alias="maxfee")
    max_fee_rate: Int | None = Field(None, alias="maxfeerate")
    max_tx_size: Int | None = Field(None, alias="maxtxsize")
    median_fee: Int | None = Field(None, alias="medianfee")
    median_time: Int | None = Field(None, alias="mediantime")
    median_tx_size: Int | None = Field(None, alias="mediantxsize")
    min_fee: Int | None = Field(None, alias="minfee")
    min_fee_rate: Int | None = Field(None, alias="minfeerate")
    min_tx_size: Int | None = Field(None, alias="mintxsize")
    outputs: Int | None = Field(None, alias="outs")
    subsidy: Int | None = None
    segwit_total_size: Int | None = Field(None, alias="swtotal_size")
    segwit_total_weight: Int | None = Field(None, alias="swtotal_weight")
    segwit_txs: Int | None = Field(None, alias="swtxs")
    time: Int | None = None
    total_out: Int | None = None
    total_size: Int | None = None
    total_weight: Int | None = None
    total_fee: Int | None = Field(None, alias="totalfee")
    txs: Int | None = None
    utxo_increase: Int | None = None
    utxo_size_increase: Int | None = Field(None, alias="utxo_size_inc")
    # v25+
    utxo_increase_actual: Int | None = None
    utxo_size_increase_actual: Int | None = Field(None, alias="utxo_size_inc_actual")


class GetBlockFilter(RpcModel):
    filter: Hex
    header: Hex


# --- mempool --------------------------------------------------------------


class GetMempoolInfoV17(RpcModel):
    size: Int
    bytes: Int
    usage: Int
    max_mempool: Int = Field(alias="maxmempool")
    mempool_min_fee: Amount = Field(alias="mempoolminfee")
    min_relay_tx_fee: Amount = Field(alias="minrelaytxfee")


class GetMempoolInfoV19(GetMempoolInfoV17):
    loaded: Bool
    # v21+
    unbroadcast_count: Int | None = Field(None, alias="unbroadcastcount")
    # v23+
    total_fee: Amount | None = None
    # v24+
    incremental_relay_fee: Amount | None = Field(None, alias="incrementalrelayfee")
    full_rbf: Bool | None = Field(None, alias="fullrbf")


GetMempoolInfo = Union[GetMempoolInfoV17, GetMempoolInfoV19]


class MempoolEntryFees(RpcModel):
    base: Amount
    modified: Amount
    ancestor: Amount
    descendant: Amount


class MempoolEntryV17(RpcModel):
    size: Int
    fee: Amount
    modified_fee: Amount = Field(alias="modifiedfee")
    time: Int
    height: Int
    descendant_count: Int = Field(alias="descendantcount")
    descendant_size: Int = Field(alias="descendantsize")
    descendant_fees: Int = Field(alias="descendantfees")
    ancestor_count: Int = Field(alias="ancestorcount")
    ancestor_size: Int = Field(alias="ancestorsize")
    ancestor_fees: Int = Field(alias="ancestorfees")
    wtxid: Txid
    fees: MempoolEntryFees | None = None
    depends: list[Txid]
    spent_by: list[Txid] = Field(alias="spentby")
    bip125_replaceable: Bool = Field(alias="bip125-replaceable")


class MempoolEntryV19(RpcModel):
    vsize: Int
    weight: Int | None = None
    time: Int
    height: Int
    descendant_count: Int = Field(alias="descendantcount")
    descendant_size: Int = Field(alias="descendantsize")
    ancestor_count: Int = Field(alias="ancestorcount")
    ancestor_size: Int = Field(alias="ancestorsize")
    wtxid: Txid
    fees: MempoolEntryFees
    depends: list[Txid]
    spent_by: list[Txid] = Field(alias="spentby")
    bip125_replaceable: Bool | None = Field(None, alias="bip125-replaceable")
    # v21+
    unbroadcast: Bool | None = None


MempoolEntry = Union[MempoolEntryV17, MempoolEntryV19]

# verbose getrawmempool / getmempoolancestors / getmempooldescendants: txid -> entry
MempoolEntriesV17 = dict[str, MempoolEntryV17]
MempoolEntriesV19 = dict[str, MempoolEntryV19]
MempoolEntries = Union[MempoolEntriesV17, MempoolEntriesV19]


# --- utxo set -------------------------------------------------------------


class ScriptPubKeyV17(RpcModel):
    asm: Str
    hex: Hex
    req_sigs: Int | None = Field(None, alias="reqSigs")
    type: Str
    addresses: list[Str] | None = None


class ScriptPubKeyV22(RpcModel):
    """``addresses``/``reqSigs`` replaced by a single ``address``."""
    asm: Str
    desc: Str | None = None
    hex: Hex
    type: Str
    address: Str | None = None


class GetTxOutV17(RpcModel):
    best_block: BlockHash = Field(alias="bestblock")
    confirmations: Int
    value: Amount
    script_pubkey: ScriptPubKeyV17 = Field(alias="scriptPubKey")
    coinbase: Bool


class GetTxOutV22(GetTxOutV17):
    script_pubkey: ScriptPubKeyV22 = Field(alias="scriptPubKey")


GetTxOut = Union[GetTxOutV17, GetTxOutV22]


class GetTxOutSetInfoV17(RpcModel):
    height: Int
    best_block: BlockHash = Field(alias="bestblock")
    transactions: Int
    txouts: Int
    bogosize: Int
    hash_serialized_2: Hex
    disk_size: Int
    total_amount: Amount


class TxOutSetBlockInfo(RpcModel):
    prevout_spent: Amount
    coinbase: Amount
    new_outputs_ex_coinbase: Amount
    unspendable: Amount
    unspendables: dict[str, Amount]


class GetTxOutSetInfoV22(RpcModel):
    """Coinstats index aware: most fields depend on the hash type."""
    height: Int
    best_block: BlockHash = Field(alias="bestblock")
    txouts: Int
    bogosize: Int
    hash_serialized_2: Hex | None = None
    muhash: Hex | None = None
    transactions: Int | None = None
    disk_size: Int | None = None
    total_amount: Amount
    total_unspendable_amount: Amount | None = None
    block_info: TxOutSetBlockInfo | None = None


class GetTxOutSetInfoV26(RpcModel):
    height: Int
    best_block: BlockHash = Field(alias="bestblock")
    txouts: Int
    bogosize: Int
    hash_serialized_3: Hex | None = None
    muhash: Hex | None = None
    transactions: Int | None = None
    disk_size: Int | None = None
    total_amount: Amount
    total_unspendable_amount: Amount | None = None
    block_info: TxOutSetBlockInfo | None = None


GetTxOutSetInfo = Union[GetTxOutSetInfoV17, GetTxOutSetInfoV22, GetTxOutSetInfoV26]


class DumpTxOutSetV20(RpcModel):
    coins_written: Int
    base_hash: BlockHash
    base_height: Int
    path: Str


class DumpTxOutSetV26(DumpTxOutSetV20):
    txoutset_hash: Hex
    n_chain_tx: Int = Field(alias="nchaintx")


DumpTxOutSet = Union[DumpTxOutSetV20, DumpTxOutSetV26]


class SaveMempool(RpcModel):
    filename: Str
