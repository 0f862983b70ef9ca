"""Response shapes for the ``== Mining ==`` and ``== Generating ==`` sections."""

from __future__ import annotations

from typing import Union

from pydantic import Field

from corerpc.types.primitives import BlockHash, Hex, Int, JsonObject, Number, RpcModel, Str, Txid


class GetMiningInfoV17(RpcModel):
    blocks: Int
    current_block_weight: Int | None = Field(None, alias="currentblockweight")
    current_block_tx: Int | None = Field(None, alias="currentblocktx")
    difficulty: Number
    network_hash_ps: Number = Field(alias="networkhashps")
    pooled_tx: Int = Field(alias="pooledtx")
    chain: Str
    warnings: Str


class GetMiningInfoV28(GetMiningInfoV17):
    warnings: list[Str]
    # v29+
    bits: Str | None = None
    target: Hex | None = None


GetMiningInfo = Union[GetMiningInfoV17, GetMiningInfoV28]


class GenerateBlock(RpcModel):
    hash: BlockHash
    # v25+, only when submit=false
    hex: Hex | None = None


class BlockTemplateTransaction(RpcModel):
    data: Hex
    txid: Txid
    hash: Txid
    # 1-based indexes into the template's transaction list
    depends: list[Int]
    fee: Int
    sigops: Int
    weight: Int


class GetBlockTemplate(RpcModel):
    """BIP22/BIP23 block template. ``coinbasevalue`` and fees are in satoshis."""
    version: Int
    rules: list[Str]
    version_bits_available: dict[str, Int] = Field(alias="vbavailable")
    version_bits_required: Int = Field(alias="vbrequired")
    previous_block_hash: BlockHash = Field(alias="previousblockhash")
    transactions: list[BlockTemplateTransaction]
    coinbase_aux: JsonObject = Field(alias="coinbaseaux")
    coinbase_value: Int = Field(alias="coinbasevalue")
    long_poll_id: Str | None = Field(None, alias="longpollid")
    target: Hex
    min_time: Int = Field(alias="mintime")
    mutable: list[Str]
    nonce_range: Hex = Field(alias="noncerange")
    sigop_limit: Int = Field(alias="sigoplimit")
    size_limit: Int | None = Field(None, alias="sizelimit")
    weight_limit: Int | None = Field(None, alias="weightlimit")
    current_time: Int = Field(alias="curtime")
    bits: Str
    height: Int
    default_witness_commitment: Hex | None = None
    # signet only
    signet_challenge: Hex | None = None
