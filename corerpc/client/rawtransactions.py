"""Typed calls for the ``== Rawtransactions ==`` section."""

from __future__ import annotations

from typing import Any

from corerpc.types import rawtransactions as t


class RawTransactionsMixin:
    def get_raw_transaction(self, txid: str, blockhash: str | None = None) -> str:
        return self.call("getrawtransaction", txid, blockhash=blockhash)

    def get_raw_transaction_verbose(self, txid: str, blockhash: str | None = None) -> t.GetRawTransactionVerbose:
        return self.call("getrawtransaction_verbose", txid, blockhash=blockhash)

    def decode_raw_transaction(self, hexstring: str, iswitness: bool | None = None) -> t.DecodeRawTransaction:
        return self.call("decoderawtransaction", hexstring, iswitness=iswitness)

    def decode_script(self, hexstring: str) -> t.DecodeScript:
        return self.call("decodescript", hexstring)

    def send_raw_transaction(self, hexstring: str, **kwargs: Any) -> str:
        """
        Broadcast a signed transaction.

        The fee guard changed between releases: ``allowhighfees`` (v17-v18),
        ``maxfeerate`` (v19+), ``maxburnamount`` (v25+).
        """
        return self.call("sendrawtransaction", hexstring, **kwargs)

    def test_mempool_accept(self, rawtxs: list[str], **kwargs: Any) -> list[t.MempoolAcceptResult]:
        return self.call("testmempoolaccept", rawtxs, **kwargs)

    def create_raw_transaction(
        self,
        inputs: list[dict[str, Any]],
        outputs: Any,
        locktime: int | None = None,
        replaceable: bool | None = None,
    ) -> str:
        return self.call("createrawtransaction", inputs, outputs, locktime=locktime, replaceable=replaceable)


    def combine_raw_transaction(self, txs: list[str]) -> str:
        return self.call("combinerawtransaction", txs)

    def fund_raw_transaction(self, hexstring: str, options: dict[str, Any] | None = None,
                             iswitness: bool | None = None) -> t.FundRawTransaction:
        return self.call("fundrawtransaction", hexstring, options=options, iswitness=iswitness)

    def sign_raw_transaction_with_key(self, hexstring: str, privkeys: list[str],
                                      **kwargs: Any) -> t.SignRawTransaction:
        return self.call("signrawtransactionwithkey", hexstring, privkeys, **kwargs)

    def create_psbt(
        self,
        inputs: list[dict[str, Any]],
        outputs: Any,
        locktime: int | None = None,
        replaceable: bool | None = None,
    ) -> str:
        """Unsigned PSBT, base64 encoded."""
        return self.call("createpsbt", inputs, outputs, locktime=locktime, replaceable=replaceable)

    def decode_psbt(self, psbt: str) -> t.DecodePsbt:
        return self.call("decodepsbt", psbt)

    def combine_psbt(self, txs: list[str]) -> str:
        return self.call("combinepsbt", txs)

    def finalize_psbt(self, psbt: str, extract: bool | None = None) -> t.FinalizePsbt:
        return self.call("finalizepsbt", psbt, extract=extract)

    def convert_to_psbt(self, hexstring: str, permitsigdata: bool | None = None,
                        iswitness: bool | None = None) -> str:
        return self.call("converttopsbt", hexstring, permitsigdata=permitsigdata, iswitness=iswitness)

    def analyze_psbt(self, psbt: str) -> t.AnalyzePsbt:
        return self.call("analyzepsbt", psbt)

    def join_psbts(self, txs: list[str]) -> str:
        return self.call("joinpsbts", txs)

    def utxo_update_psbt(self, psbt: str, descriptors: list[Any] | None = None) -> str:
        """``descriptors`` is accepted from v19 on."""
        return self.call("utxoupdatepsbt", psbt, descriptors=descriptors)
