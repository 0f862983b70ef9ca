"""Response shapes for the ``== Util ==`` section."""

from __future__ import annotations

from typing import Union

from pydantic import Field

from corerpc.types.primitives import Amount, Bool, Hex, Int, RpcModel, Str


class EstimateSmartFee(RpcModel):
    """``feerate`` is absent when the node has too little data to estimate."""
    fee_rate: Amount | None = Field(None, alias="feerate")
    errors: list[Str] | None = None
    blocks: Int


class ValidateAddress(RpcModel):
    is_valid: Bool = Field(alias="isvalid")
    address: Str | None = None
    script_pubkey: Hex | None = Field(None, alias="scriptPubKey")
    is_script: Bool | None = Field(None, alias="isscript")
    is_witness: Bool | None = Field(None, alias="iswitness")
    witness_version: Int | None = None
    witness_program: Hex | None = None
    # v22+
    error: Str | None = None
    error_locations: list[Int] | None = None


class GetDescriptorInfo(RpcModel):
    descriptor: Str
    checksum: Str | None = None
    is_range: Bool = Field(alias="isrange")
    is_solvable: Bool = Field(alias="issolvable")
    has_private_keys: Bool = Field(alias="hasprivatekeys")


class CreateMultisigV17(RpcModel):
    address: Str
    redeem_script: Hex = Field(alias="redeemScript")


class CreateMultisigV20(CreateMultisigV17):
    descriptor: Str
    # v23+
    warnings: list[Str] | None = None


CreateMultisig = Union[CreateMultisigV17, CreateMultisigV20]


class IndexInfo(RpcModel):
    synced: Bool
    best_block_height: Int
