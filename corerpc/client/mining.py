"""Typed calls for the ``== Mining ==`` and ``== Generating ==`` sections."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from corerpc.types import mining as t


class MiningMixin:
    def get_block_template(self, template_request: dict[str, Any] | None = None) -> t.GetBlockTemplate:
        """Defaults to ``{"rules": ["segwit"]}``."""
        return self.call("getblocktemplate", template_request or {"rules": ["segwit"]})

    def get_mining_info(self) -> t.GetMiningInfo:
        return self.call("getmininginfo")

    def get_network_hash_ps(self, nblocks: int | None = None, height: int | None = None) -> Decimal:
        return self.call("getnetworkhashps", nblocks=nblocks, height=height)

    def generate_to_address(self, nblocks: int, address: str, maxtries: int | None = None) -> list[str]:
        return self.call("generatetoaddress", nblocks, address, maxtries=maxtries)

    def generate_to_descriptor(self, num_blocks: int, descriptor: str, maxtries: int | None = None) -> list[str]:
        return self.call("generatetodescriptor", num_blocks, descriptor, maxtries=maxtries)

    def generate_block(self, output: str, transactions: list[str], submit: bool | None = None) -> t.GenerateBlock:
        """``submit`` is accepted from v25 on."""
        return self.call("generateblock", output, transactions, submit=submit)

    def submit_block(self, hexdata: str) -> str | None:
        """``None`` when the block was accepted, otherwise the rejection reason."""
        return self.call("submitblock", hexdata)

    def prioritise_transaction(self, txid: str, fee_delta: int) -> bool:
        return self.call("prioritisetransaction", txid, fee_delta=fee_delta)
