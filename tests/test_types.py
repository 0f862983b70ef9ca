"""Version-specific response shapes, exercised through the client."""

from __future__ import annotations

from decimal import Decimal

import pytest

from conftest import FakeTransport
from corerpc.client import Client
from corerpc.errors import InvalidParameters, MissingField, TypeMismatch
from corerpc.types.blockchain import GetBlockchainInfoV17, GetBlockchainInfoV28, MempoolEntryV19
from corerpc.types.network import GetNetworkInfoV21, GetNetworkInfoV28
from corerpc.types.rawtransactions import DecodePsbtV22
from corerpc.version import DaemonVersion

BEST = "00000000000000000001b0c5a1a1c3e6c1e77c1f0c4f2f6cc8e40ddf3f1d1f2a"
CHAINWORK = "0000000000000000000000000000000000000000592f6b5d8e5c5a3b0f1b2e3c"
TXID = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"
PARENT = "b1fea52486ce0c62bb442b530a3f0132b826c74e473d1f2c220bfa78111c5082"


def _chain_info(**extra):
    info = {
        "chain": "main",
        "blocks": 800000,
        "headers": 800000,
        "bestblockhash": BEST,
        "difficulty": Decimal("53911173001054.59"),
        "mediantime": 1690166540,
        "verificationprogress": Decimal("0.9999987"),
        "initialblockdownload": False,
        "chainwork": CHAINWORK,
        "size_on_disk": 575000000000,
        "pruned": False,
    }
    info.update(extra)
    return info


def _network_info(warnings, **extra):
    info = {
        "version": 280100,
        "subversion": "/Satoshi:28.1.0/",
        "protocolversion": 70016,
        "localservices": "0000000000000c09",
        "localservicesnames": ["NETWORK", "WITNESS", "NETWORK_LIMITED", "P2P_V2"],
        "localrelay": True,
        "timeoffset": 0,
        "networkactive": True,
        "connections": 10,
        "connections_in": 0,
        "connections_out": 10,
        "networks": [
            {
                "name": "ipv4",
                "limited": False,
                "reachable": True,
                "proxy": "",
                "proxy_randomize_credentials": False,
            }
        ],
        "relayfee": Decimal("0.00001"),
        "incrementalfee": Decimal("0.00001"),
        "localaddresses": [],
        "warnings": warnings,
    }
    info.update(extra)
    return info


class TestGetBlockchainInfo:
    def test_v17_softfork_layout(self) -> None:
        payload = _chain_info(
            softforks=[{"id": "bip34", "version": 2, "reject": {"status": True}}],
            bip9_softforks={
                "csv": {"status": "active", "startTime": 1462060800, "timeout": 1493596800, "since": 419328},
            },
            warnings="",
        )
        info = Client(FakeTransport(("result", payload)), DaemonVersion.V17).get_blockchain_info()
        assert isinstance(info, GetBlockchainInfoV17)
        assert info.softforks[0].reject.status is True
        assert info.bip9_softforks["csv"].since == 419328

    def test_v28_warnings_list(self) -> None:
        payload = _chain_info(time=1690168629, warnings=["unknown new rules activated"], extra_field=1)
        info = Client(FakeTransport(("result", payload)), DaemonVersion.V28).get_blockchain_info()
        assert isinstance(info, GetBlockchainInfoV28)
        assert info.warnings == ["unknown new rules activated"]
        assert info.verification_progress == Decimal("0.9999987")
        assert info.target is None

    def test_v28_rejects_v17_payload(self) -> None:
        payload = _chain_info(time=1690168629, warnings="")
        with pytest.raises(TypeMismatch) as exc:
            Client(FakeTransport(("result", payload)), DaemonVersion.V28).get_blockchain_info()
        assert exc.value.field == "warnings"
        assert exc.value.expected == "array"


class TestGetNetworkInfo:
    def test_v21_and_v28(self) -> None:
        v21 = Client(FakeTransport(("result", _network_info(""))), DaemonVersion.V21).get_network_info()
        v28 = Client(FakeTransport(("result", _network_info([]))), DaemonVersion.V28).get_network_info()
        assert type(v21) is GetNetworkInfoV21
        assert type(v28) is GetNetworkInfoV28
        assert v21.relay_fee == v28.relay_fee == Decimal("0.00001")
        assert v28.connections_out == 10


def test_gettxout_for_spent_output_is_none() -> None:
    client = Client(FakeTransport(("result", None)), DaemonVersion.V26)
    assert client.get_tx_out(BEST, 0) is None


def test_estimatesmartfee() -> None:
    transport = FakeTransport(("result", {"feerate": Decimal("0.00012"), "blocks": 2}))
    fee = Client(transport, DaemonVersion.V26).estimate_smart_fee(2, "economical")
    assert fee.fee_rate == Decimal("0.00012")
    assert transport.last_params == [2, "economical"]


def _mempool_entry(**extra):
    entry = {
        "vsize": 141,
        "weight": 561,
        "time": 1690168000,
        "height": 799999,
        "descendantcount": 1,
        "descendantsize": 141,
        "ancestorcount": 2,
        "ancestorsize": 282,
        "wtxid": TXID,
        "fees": {
            "base": Decimal("0.00001410"),
            "modified": Decimal("0.00001410"),
            "ancestor": Decimal("0.00002820"),
            "descendant": Decimal("0.00001410"),
        },
        "depends": [PARENT],
        "spentby": [],
        "bip125-replaceable": False,
        "unbroadcast": False,
    }
    entry.update(extra)
    return entry


class TestMempool:
    def test_verbose_mempool_is_keyed_by_txid(self) -> None:
        transport = FakeTransport(("result", {TXID: _mempool_entry()}))
        entries = Client(transport, DaemonVersion.V26).get_raw_mempool_verbose()
        assert transport.requests[0]["method"] == "getrawmempool"
        assert transport.last_params == [True]
        assert isinstance(entries[TXID], MempoolEntryV19)
        assert entries[TXID].fees.ancestor == Decimal("0.0000282")

    def test_ancestors_plain_and_verbose(self) -> None:
        transport = FakeTransport(("result", [PARENT]), ("result", {PARENT: _mempool_entry(depends=[])}))
        client = Client(transport, DaemonVersion.V19)
        assert client.get_mempool_ancestors(TXID) == [PARENT]
        assert transport.last_params == [TXID, False]
        ancestors = client.get_mempool_ancestors_verbose(TXID)
        assert transport.last_params == [TXID, True]
        assert ancestors[PARENT].depends == []

    def test_descendants_entry_missing_fees(self) -> None:
        entry = _mempool_entry()
        del entry["fees"]
        transport = FakeTransport(("result", {TXID: entry}))
        with pytest.raises(MissingField) as exc:
            Client(transport, DaemonVersion.V22).get_mempool_descendants_verbose(PARENT)
        assert exc.value.field == f"{TXID}.fees"
        assert transport.methods == ["getmempooldescendants"]


def test_getblockstats_subset() -> None:
    wanted = ["height", "avgfeerate", "feerate_percentiles"]
    payload = {"height": 800000, "avgfeerate": 32, "feerate_percentiles": [9, 13, 20, 31, 80]}
    transport = FakeTransport(("result", payload))
    stats = Client(transport, DaemonVersion.V26).get_block_stats(800000, wanted)
    assert stats.avg_fee_rate == 32
    assert stats.fee_rate_percentiles[2] == 20
    assert stats.total_fee is None
    assert transport.last_params == [800000, wanted]


def test_getblocktemplate_sends_segwit_rule() -> None:
    template = {
        "capabilities": ["proposal"],
        "version": 536870912,
        "rules": ["csv", "!segwit", "taproot"],
        "vbavailable": {},
        "vbrequired": 0,
        "previousblockhash": BEST,
        "transactions": [
            {
                "data": "0200000001",
                "txid": TXID,
                "hash": TXID,
                "depends": [],
                "fee": 1410,
                "sigops": 4,
                "weight": 561,
            }
        ],
        "coinbaseaux": {},
        "coinbasevalue": 625001410,
        "longpollid": BEST + "5",
        "target": "00000000000000000005385e0000000000000000000000000000000000000000",
        "mintime": 1690166541,
        "mutable": ["time", "transactions", "prevblock"],
        "noncerange": "00000000ffffffff",
        "sigoplimit": 80000,
        "sizelimit": 4000000,
        "weightlimit": 4000000,
        "curtime": 1690168700,
        "bits": "17053894",
        "height": 800001,
        "default_witness_commitment": "6a24aa21a9ed",
    }
    transport = FakeTransport(("result", template))
    result = Client(transport, DaemonVersion.V26).get_block_template()
    assert transport.last_params == [{"rules": ["segwit"]}]
    assert result.coinbase_value == 625001410
    assert result.transactions[0].fee == 1410


class TestWalletShapes:
    def test_getwalletinfo_reads_every_keypool_field(self) -> None:
        payload = {
            "walletname": "",
            "walletversion": 169900,
            "format": "sqlite",
            "balance": Decimal("0.00000000"),
            "unconfirmed_balance": Decimal("0.00000000"),
            "immature_balance": Decimal("0.00000000"),
            "txcount": 0,
            "keypoololdest": 1690000000,
            "keypoolsize": 4000,
            "keypoolsize_hd_internal": 1000,
            "unlocked_until": 0,
            "paytxfee": Decimal("0.00000000"),
            "private_keys_enabled": True,
            "avoid_reuse": False,
            "scanning": False,
            "descriptors": True,
            "external_signer": False,
            "blank": False,
            "birthtime": 1690000000,
            "lastprocessedblock": {"hash": BEST, "height": 800000},
        }
        info = Client(FakeTransport(("result", payload)), DaemonVersion.V26).get_wallet_info()
        assert info.keypool_size == 4000
        assert info.keypool_size_hd_internal == 1000
        assert info.keypool_oldest == 1690000000
        assert info.scanning is False
        assert info.last_processed_block.height == 800000

    def test_getwalletinfo_while_scanning(self) -> None:
        payload = {
            "walletname": "w",
            "walletversion": 169900,
            "txcount": 3,
            "paytxfee": 0,
            "private_keys_enabled": True,
            "scanning": {"duration": 12, "progress": Decimal("0.5")},
        }
        info = Client(FakeTransport(("result", payload)), DaemonVersion.V21).get_wallet_info()
        assert info.scanning.duration == 12
        assert info.scanning.progress == Decimal("0.5")

    def test_getaddressinfo_hd_fields(self) -> None:
        payload = {
            "address": "bcrt1qw508d6qejxtdg4y5r3zarvary0c5xw7kygt080",
            "scriptPubKey": "0014751e76e8199196d454941c45d1b3a323f1433bd6",
            "ismine": True,
            "solvable": True,
            "desc": "wpkh([d90c6a4f/84h/1h/0h/0/0]02aa)#abcd",
            "iswatchonly": False,
            "isscript": False,
            "iswitness": True,
            "witness_version": 0,
            "witness_program": "751e76e8199196d454941c45d1b3a323f1433bd6",
            "ischange": False,
            "timestamp": 1690000000,
            "hdkeypath": "m/84h/1h/0h/0/0",
            "hdseedid": "0000000000000000000000000000000000000000",
            "hdmasterfingerprint": "d90c6a4f",
            "labels": [""],
        }
        info = Client(FakeTransport(("result", payload)), DaemonVersion.V26).get_address_info(payload["address"])
        assert info.hd_master_fingerprint == "d90c6a4f"
        assert info.witness_version == 0
        assert info.labels == [""]

    def test_listsinceblock(self) -> None:
        item = {
            "address": "bcrt1qw508d6qejxtdg4y5r3zarvary0c5xw7kygt080",
            "category": "receive",
            "amount": Decimal("1.5"),
            "label": "",
            "vout": 0,
            "confirmations": 2,
            "blockhash": BEST,
            "blockheight": 800000,
            "blockindex": 1,
            "blocktime": 1690168629,
            "txid": TXID,
            "walletconflicts": [],
            "time": 1690168600,
            "timereceived": 1690168600,
            "bip125-replaceable": "no",
        }
        transport = FakeTransport(("result", {"transactions": [item], "removed": [], "lastblock": BEST}))
        result = Client(transport, DaemonVersion.V26).list_since_block(BEST, target_confirmations=6)
        assert transport.last_params == [BEST, 6]
        assert result.transactions[0].amount == Decimal("1.5")
        assert result.last_block == BEST

    def test_listaddressgroupings_with_and_without_label(self) -> None:
        groups = [[["bcrt1qaddr0", Decimal("0.5"), "savings"], ["bcrt1qaddr1", Decimal("0.25")]]]
        result = Client(FakeTransport(("result", groups)), DaemonVersion.V26).list_address_groupings()
        assert result[0][0] == ("bcrt1qaddr0", Decimal("0.5"), "savings")
        assert result[0][1] == ("bcrt1qaddr1", Decimal("0.25"))

    def test_signrawtransactionwithwallet_reports_errors(self) -> None:
        payload = {
            "hex": "0200000001",
            "complete": False,
            "errors": [
                {
                    "txid": TXID,
                    "vout": 0,
                    "witness": [],
                    "scriptSig": "",
                    "sequence": 4294967293,
                    "error": "Input not found or already spent",
                }
            ],
        }
        client = Client(FakeTransport(("result", payload)), DaemonVersion.V26)
        result = client.sign_raw_transaction_with_wallet("0200000001")
        assert result.complete is False
        assert result.errors[0].error == "Input not found or already spent"


class TestPsbt:
    def test_decodepsbt_v22_witness_utxo(self) -> None:
        payload = {
            "tx": {
                "txid": TXID,
                "hash": TXID,
                "version": 2,
                "size": 82,
                "vsize": 82,
                "weight": 328,
                "locktime": 0,
                "vin": [{"txid": PARENT, "vout": 0, "scriptSig": {"asm": "", "hex": ""}, "sequence": 4294967293}],
                "vout": [
                    {
                        "value": Decimal("0.9999"),
                        "n": 0,
                        "scriptPubKey": {"asm": "0 751e", "hex": "0014751e", "type": "witness_v0_keyhash"},
                    }
                ],
            },
            "global_xpubs": [],
            "psbt_version": 0,
            "proprietary": [],
            "unknown": {},
            "inputs": [
                {
                    "witness_utxo": {
                        "amount": Decimal("1.0"),
                        "scriptPubKey": {"asm": "0 751e", "hex": "0014751e", "type": "witness_v0_keyhash"},
                    },
                    "bip32_derivs": [{"pubkey": "02aa", "master_fingerprint": "d90c6a4f", "path": "m/84h/1h/0h/0/0"}],
                }
            ],
            "outputs": [{}],
            "fee": Decimal("0.0001"),
        }
        psbt = Client(FakeTransport(("result", payload)), DaemonVersion.V26).decode_psbt("cHNidP8B")
        assert isinstance(psbt, DecodePsbtV22)
        assert psbt.inputs[0].witness_utxo.amount == Decimal("1.0")
        assert psbt.fee == Decimal("0.0001")

    def test_analyzepsbt(self) -> None:
        payload = {
            "inputs": [
                {"has_utxo": True, "is_final": False, "missing": {"signatures": ["751e"]}, "next": "signer"}
            ],
            "estimated_vsize": 141,
            "estimated_feerate": Decimal("0.00010000"),
            "fee": Decimal("0.0000141"),
            "next": "signer",
        }
        result = Client(FakeTransport(("result", payload)), DaemonVersion.V22).analyze_psbt("cHNidP8B")
        assert result.inputs[0].missing.signatures == ["751e"]
        assert result.next == "signer"

    def test_finalize_and_string_results(self) -> None:
        transport = FakeTransport(
            ("result", {"hex": "0200000001", "complete": True}),
            ("result", "cHNidP8BAA=="),
            ("result", "cHNidP8BAB=="),
        )
        client = Client(transport, DaemonVersion.V19)
        assert client.finalize_psbt("cHNidP8B").hex == "0200000001"
        assert client.combine_psbt(["cHNidP8B", "cHNidP8C"]) == "cHNidP8BAA=="
        assert client.utxo_update_psbt("cHNidP8B", descriptors=["wpkh(02aa)"]) == "cHNidP8BAB=="
        assert transport.methods == ["finalizepsbt", "combinepsbt", "utxoupdatepsbt"]
        assert transport.last_params == ["cHNidP8B", ["wpkh(02aa)"]]

    def test_createpsbt_sends_amounts_as_strings(self) -> None:
        transport = FakeTransport(("result", "cHNidP8B"))
        Client(transport, DaemonVersion.V26).create_psbt(
            [{"txid": PARENT, "vout": 0}], {"bcrt1qaddr0": Decimal("0.1")}, replaceable=True
        )
        assert transport.last_params == [[{"txid": PARENT, "vout": 0}], {"bcrt1qaddr0": "0.1"}, 0, True]


class TestNetworkShapes:
    def test_getaddednodeinfo(self) -> None:
        payload = [
            {
                "addednode": "192.0.2.1:8333",
                "connected": True,
                "addresses": [{"address": "192.0.2.1:8333", "connected": "outbound"}],
            }
        ]
        nodes = Client(FakeTransport(("result", payload)), DaemonVersion.V26).get_added_node_info()
        assert nodes[0].added_node == "192.0.2.1:8333"
        assert nodes[0].addresses[0].connected == "outbound"

    def test_getnodeaddresses_network_argument(self) -> None:
        payload = [{"time": 1690168000, "services": 1033, "address": "192.0.2.7", "port": 8333, "network": "ipv4"}]
        transport = FakeTransport(("result", payload))
        addresses = Client(transport, DaemonVersion.V22).get_node_addresses(5, "ipv4")
        assert addresses[0].network == "ipv4"
        assert transport.last_params == [5, "ipv4"]

        with pytest.raises(InvalidParameters):
            Client(FakeTransport(), DaemonVersion.V21).get_node_addresses(5, "ipv4")

    def test_getzmqnotifications(self) -> None:
        payload = [{"type": "pubhashblock", "address": "tcp://127.0.0.1:28332", "hwm": 1000}]
        notifications = Client(FakeTransport(("result", payload)), DaemonVersion.V26).get_zmq_notifications()
        assert notifications[0].type == "pubhashblock"
        assert notifications[0].hwm == 1000
