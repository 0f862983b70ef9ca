"""Typed calls for the ``== Blockchain ==`` section."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from corerpc.types import blockchain as t


class BlockchainMixin:
    def get_best_block_hash(self) -> str:
        return self.call("getbestblockhash")

    def get_block_count(self) -> int:
        return self.call("getblockcount")

    def get_block_hash(self, height: int) -> str:
        return self.call("getblockhash", height)

    def get_block(self, blockhash: str) -> t.GetBlockVerboseOne:
        """Block header fields and txids (verbosity 1)."""
        return self.call("getblock", blockhash)

    def get_block_hex(self, blockhash: str) -> str:
        """Serialized block (verbosity 0)."""
        return self.call("getblock_hex", blockhash)

    def get_block_header(self, blockhash: str) -> t.GetBlockHeaderVerbose:
        return self.call("getblockheader", blockhash)

    def get_block_header_hex(self, blockhash: str) -> str:
        return self.call("getblockheader_hex", blockhash)

    def get_blockchain_info(self) -> t.GetBlockchainInfo:
        return self.call("getblockchaininfo")

    def get_difficulty(self) -> Decimal:
        return self.call("getdifficulty")

    def get_chain_tips(self) -> list[t.ChainTip]:
        return self.call("getchaintips")

    def get_chain_tx_stats(self, nblocks: int | None = None, blockhash: str | None = None) -> t.GetChainTxStats:
        return self.call("getchaintxstats", nblocks=nblocks, blockhash=blockhash)

    def get_mempool_info(self) -> t.GetMempoolInfo:
        return self.call("getmempoolinfo")

    def get_mempool_entry(self, txid: str) -> t.MempoolEntry:
        return self.call("getmempoolentry", txid)

    def get_raw_mempool(self) -> list[str]:
        return self.call("getrawmempool")

    def get_raw_mempool_verbose(self) -> t.MempoolEntries:
        """Every mempool entry, keyed by txid."""
        return self.call("getrawmempool_verbose")

    def get_mempool_ancestors(self, txid: str) -> list[str]:
        return self.call("getmempoolancestors", txid)

    def get_mempool_ancestors_verbose(self, txid: str) -> t.MempoolEntries:
        return self.call("getmempoolancestors_verbose", txid)

    def get_mempool_descendants(self, txid: str) -> list[str]:
        return self.call("getmempooldescendants", txid)

    def get_mempool_descendants_verbose(self, txid: str) -> t.MempoolEntries:
        return self.call("getmempooldescendants_verbose", txid)

    def get_block_stats(self, hash_or_height: str | int, stats: list[str] | None = None) -> t.GetBlockStats:
        return self.call("getblockstats", hash_or_height, stats=stats)

    def get_tx_out_proof(self, txids: list[str], blockhash: str | None = None) -> str:
        return self.call("gettxoutproof", txids, blockhash=blockhash)

    def verify_tx_out_proof(self, proof: str) -> list[str]:
        """Txids the proof commits to; empty when the block is not in the best chain."""
        return self.call("verifytxoutproof", proof)

    def get_tx_out(self, txid: str, n: int, include_mempool: bool | None = None) -> t.GetTxOut | None:
        """``None`` when the output is spent or does not exist."""
        return self.call("gettxout", txid, n, include_mempool=include_mempool)

    def get_tx_out_set_info(self, hash_type: str | None = None, hash_or_height: Any = None,
                            use_index: bool | None = None) -> t.GetTxOutSetInfo:
        return self.call(
            "gettxoutsetinfo", hash_type=hash_type, hash_or_height=hash_or_height, use_index=use_index
        )

    def dump_tx_out_set(self, path: str, **kwargs: Any) -> t.DumpTxOutSet:
        """``type`` and ``options`` are accepted from v28 on."""
        return self.call("dumptxoutset", path, **kwargs)

    def verify_chain(self, checklevel: int | None = None, nblocks: int | None = None) -> bool:
        return self.call("verifychain", checklevel=checklevel, nblocks=nblocks)

    def prune_blockchain(self, height: int) -> int:
        return self.call("pruneblockchain", height)

    def save_mempool(self) -> t.SaveMempool | None:
        return self.call("savemempool")

    def precious_block(self, blockhash: str) -> None:
        return self.call("preciousblock", blockhash)

    def get_block_filter(self, blockhash: str, filtertype: str | None = None) -> t.GetBlockFilter:
        return self.call("getblockfilter", blockhash, filtertype=filtertype)
