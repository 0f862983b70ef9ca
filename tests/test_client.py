"""Tests for corerpc.client: dispatch, negotiation and the call lifecycle."""

from __future__ import annotations

from decimal import Decimal

import pytest

from conftest import FakeTransport, network_info
from corerpc.client import CallState, Client, ClientBase, RpcCall, negotiate_version
from corerpc.config.schema import RpcSettings
from corerpc.errors import (
    ApplicationError,
    AuthenticationFailed,
    CorrelationMismatch,
    InvalidParameters,
    MalformedEnvelope,
    MethodNotFound,
    MissingField,
    TransportError,
    TransportKind,
    TypeMismatch,
    UnsupportedMethod,
    UnsupportedVersion,
)
from corerpc.registry import DEFAULT_REGISTRY, NODE_VERSION
from corerpc.transport.base import TransportFailure
from corerpc.types.blockchain import GetBlockVerboseOne
from corerpc.types.wallet import CreateWalletV17, CreateWalletV25
from corerpc.version import DaemonVersion

BLOCK_HASH = "00000000000000000002a7c4c1e48d76c5a37902165a270156b7a8d72728a054"
TXID = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"


def _block(**overrides):
    block = {
        "hash": BLOCK_HASH,
        "confirmations": 10,
        "size": 1500000,
        "strippedsize": 800000,
        "weight": 3993000,
        "height": 800000,
        "version": 536870912,
        "versionHex": "20000000",
        "merkleroot": TXID,
        "tx": [TXID],
        "time": 1690168629,
        "mediantime": 1690166540,
        "nonce": 106861918,
        "bits": "17053894",
        "difficulty": 53911173001054.59,
        "chainwork": "00000000000000000000000000000000000000004f1ea0ebf4a5d1b4d52e8a3b",
        "nTx": 1,
        "previousblockhash": BLOCK_HASH,
    }
    block.update(overrides)
    return block


class TestDispatch:
    def test_bare_integer_response(self) -> None:
        transport = FakeTransport(("raw", b'{"result": 800000, "error": null, "id": 1}'))
        client = Client(transport, DaemonVersion.V26)
        assert client.get_block_count() == 800000
        assert transport.requests == [
            {"jsonrpc": "2.0", "id": 1, "method": "getblockcount", "params": []}
        ]

    @pytest.mark.parametrize(
        "version, raw",
        [
            (DaemonVersion.V17, b'{"result": 1.5, "error": null, "id": 1}'),
            (DaemonVersion.V26, b'{"result": "1.50000000", "error": null, "id": 1}'),
        ],
    )
    def test_amount_encodings_decode_to_the_same_value(self, version, raw) -> None:
        client = Client(FakeTransport(("raw", raw)), version)
        balance = client.get_balance()
        assert balance == Decimal("1.5")
        assert isinstance(balance, Decimal)

    def test_optional_arguments_fill_gaps(self) -> None:
        transport = FakeTransport(("result", Decimal("0.5")))
        client = Client(transport, DaemonVersion.V18)
        client.get_balance(include_watchonly=True)
        assert transport.last_params == ["*", 0, True]

    def test_version_specific_argument_on_older_daemon(self) -> None:
        client = Client(FakeTransport(), DaemonVersion.V18)
        with pytest.raises(InvalidParameters, match="avoid_reuse"):
            client.get_balance(avoid_reuse=False)

    def test_verbosity_variant_sends_fixed_slot(self) -> None:
        transport = FakeTransport(("result", _block()), ("result", "00ff"))
        client = Client(transport, DaemonVersion.V26)
        block = client.get_block(BLOCK_HASH)
        assert isinstance(block, GetBlockVerboseOne)
        assert block.n_tx == 1
        assert block.difficulty == Decimal("53911173001054.59")
        assert block.target is None
        assert client.get_block_hex(BLOCK_HASH) == "00ff"
        assert [r["params"] for r in transport.requests] == [[BLOCK_HASH, 1], [BLOCK_HASH, 0]]
        assert transport.methods == ["getblock", "getblock"]

    def test_response_shape_follows_version(self) -> None:
        v17 = Client(FakeTransport(("result", {"name": "w", "warning": ""})), DaemonVersion.V17)
        v25 = Client(FakeTransport(("result", {"name": "w"})), DaemonVersion.V25)
        assert isinstance(v17.create_wallet("w"), CreateWalletV17)
        created = v25.create_wallet("w")
        assert isinstance(created, CreateWalletV25)
        assert created.warnings is None

    def test_call_by_name(self) -> None:
        transport = FakeTransport(("result", BLOCK_HASH))
        client = Client(transport, "v26")
        assert client.call("getblockhash", 800000) == BLOCK_HASH
        assert transport.last_params == [800000]

    def test_supports(self) -> None:
        client = Client(FakeTransport(), DaemonVersion.V18)
        assert client.supports("getblockcount")
        assert not client.supports("getbalances")
        assert not client.supports("getfoo")

    def test_request_ids_increase(self) -> None:
        transport = FakeTransport(("result", 1), ("result", 2))
        client = Client(transport, DaemonVersion.V26)
        client.get_block_count()
        client.get_block_count()
        assert [r["id"] for r in transport.requests] == [1, 2]

    def test_null_result_for_methods_without_return_value(self) -> None:
        client = Client(FakeTransport(("result", None)), DaemonVersion.V26)
        assert client.ping() is None


class TestErrors:
    def test_connection_refused(self) -> None:
        transport = FakeTransport(
            TransportFailure(TransportKind.CONNECTION_REFUSED, "cannot connect to http://127.0.0.1:8332")
        )
        client = Client(transport, DaemonVersion.V26)
        with pytest.raises(TransportError) as exc:
            client.get_block_count()
        assert exc.value.kind is TransportKind.CONNECTION_REFUSED
        assert exc.value.method == "getblockcount"
        assert exc.value.version is DaemonVersion.V26

    def test_raw_os_error_is_classified(self) -> None:
        client = Client(FakeTransport(ConnectionRefusedError("refused")), DaemonVersion.V26)
        with pytest.raises(TransportError) as exc:
            client.get_block_count()
        assert exc.value.kind is TransportKind.CONNECTION_REFUSED

    def test_daemon_error_objects(self) -> None:
        transport = FakeTransport(
            ("error", -5, "Block not found"),
            ("error", -32601, "Method not found"),
            ("error", -13, "Please enter the wallet passphrase with walletpassphrase first."),
        )
        client = Client(transport, DaemonVersion.V26)
        with pytest.raises(ApplicationError) as exc:
            client.get_block(BLOCK_HASH)
        assert exc.value.rpc_code == -5
        assert exc.value.method == "getblock"
        with pytest.raises(MethodNotFound):
            client.get_block_count()
        with pytest.raises(AuthenticationFailed):
            client.dump_priv_key("bc1qexample")

    def test_missing_field(self) -> None:
        block = _block()
        del block["height"]
        client = Client(FakeTransport(("result", block)), DaemonVersion.V26)
        with pytest.raises(MissingField) as exc:
            client.get_block(BLOCK_HASH)
        assert exc.value.field == "height"
        assert exc.value.version is DaemonVersion.V26

    def test_type_mismatch(self) -> None:
        client = Client(FakeTransport(("result", "800000")), DaemonVersion.V26)
        with pytest.raises(TypeMismatch) as exc:
            client.get_block_count()
        assert exc.value.field == "result"

    def test_malformed_and_mismatched_envelopes(self) -> None:
        transport = FakeTransport(
            ("raw", b"<html>busy</html>"),
            ("raw", b'{"result": 1, "error": null, "id": 42}'),
        )
        client = Client(transport, DaemonVersion.V26)
        with pytest.raises(MalformedEnvelope) as exc:
            client.get_block_count()
        assert exc.value.method == "getblockcount"
        with pytest.raises(CorrelationMismatch):
            client.get_block_count()

    def test_transport_returning_no_body(self) -> None:
        client = Client(FakeTransport(("raw", None)), DaemonVersion.V26)
        with pytest.raises(MalformedEnvelope) as exc:
            client.get_block_count()
        assert exc.value.method == "getblockcount"
        assert exc.value.version is DaemonVersion.V26

    def test_lookup_failures_send_nothing(self) -> None:
        transport = FakeTransport()
        client = Client(transport, DaemonVersion.V18)
        with pytest.raises(UnsupportedVersion):
            client.get_balances()
        with pytest.raises(UnsupportedMethod):
            client.call("getfoo")
        with pytest.raises(InvalidParameters):
            client.call("getblockhash")
        assert transport.requests == []

    def test_unsupported_version_at_construction(self) -> None:
        with pytest.raises(UnsupportedVersion):
            Client(FakeTransport(), 16)


class TestNegotiation:
    def test_connect_reads_node_version(self) -> None:
        transport = FakeTransport(("result", network_info(260100)), ("result", 800000))
        client = Client.connect(transport)
        assert client.version is DaemonVersion.V26
        assert client.get_block_count() == 800000
        assert transport.methods == ["getnetworkinfo", "getblockcount"]
        assert [r["id"] for r in transport.requests] == [1, 2]

    def test_old_version_string_format(self) -> None:
        transport = FakeTransport(("result", network_info(170100, "/Satoshi:0.17.1/")))
        assert negotiate_version(transport) is DaemonVersion.V17

    def test_daemon_outside_supported_range(self) -> None:
        transport = FakeTransport(("result", network_info(160300, "/Satoshi:0.16.3/")))
        with pytest.raises(UnsupportedVersion) as exc:
            negotiate_version(transport)
        assert "0.16.3" in exc.value.message

    def test_negotiation_failure_has_unknown_version(self) -> None:
        transport = FakeTransport(TransportFailure(TransportKind.TIMEOUT, "timeout after 30.0s"))
        with pytest.raises(TransportError) as exc:
            Client.connect(transport)
        assert exc.value.kind is TransportKind.TIMEOUT
        assert exc.value.method == "getnetworkinfo"
        assert exc.value.version is None

    def test_from_settings_with_configured_version(self) -> None:
        client = Client.from_settings(RpcSettings(version=25, url="http://127.0.0.1:18443"))
        try:
            assert client.version is DaemonVersion.V25
            assert client.transport.endpoint == "http://127.0.0.1:18443"
        finally:
            client.close()


class TestRpcCall:
    def test_success_walks_every_state(self, monkeypatch) -> None:
        seen: list[CallState] = []
        original = RpcCall._advance

        def record(self, state):
            seen.append(state)
            original(self, state)

        monkeypatch.setattr(RpcCall, "_advance", record)
        descriptor = DEFAULT_REGISTRY.lookup("getblockcount", DaemonVersion.V26)
        call = RpcCall(descriptor, DaemonVersion.V26, 5)
        assert call.execute(FakeTransport(("result", 3))) == 3
        assert seen == [CallState.SENT, CallState.DECODING, CallState.SUCCEEDED]
        assert call.finished
        assert call.error is None

    def test_failure_records_error(self) -> None:
        descriptor = DEFAULT_REGISTRY.lookup("getblockcount", DaemonVersion.V26)
        call = RpcCall(descriptor, DaemonVersion.V26, 5)
        with pytest.raises(ApplicationError) as exc:
            call.execute(FakeTransport(("error", -28, "Loading block index...")))
        assert call.state is CallState.FAILED
        assert call.error is exc.value

    def test_build_failure_never_sends(self) -> None:
        transport = FakeTransport()
        descriptor = DEFAULT_REGISTRY.lookup("getblockhash", DaemonVersion.V26)
        call = RpcCall(descriptor, DaemonVersion.V26, 1)
        with pytest.raises(InvalidParameters):
            call.execute(transport, ["not-a-height"])
        assert call.state is CallState.FAILED
        assert transport.requests == []

    def test_single_use(self) -> None:
        call = RpcCall(NODE_VERSION, None, 1)
        call.execute(FakeTransport(("result", network_info())))
        with pytest.raises(RuntimeError, match="already executed"):
            call.execute(FakeTransport(("result", network_info())))

    def test_version_label_while_negotiating(self) -> None:
        assert RpcCall(NODE_VERSION, None, 1).version_label == "unknown version"


class TestLifecycle:
    def test_context_manager_closes_transport(self) -> None:
        transport = FakeTransport()
        with Client(transport, DaemonVersion.V26) as client:
            assert isinstance(client, ClientBase)
        assert transport.closed

    def test_transport_without_close(self) -> None:
        class Minimal:
            def send(self, payload: bytes) -> bytes:
                return b'{"result": 1, "error": null, "id": 1}'

        client = Client(Minimal(), DaemonVersion.V26)
        assert client.get_block_count() == 1
        client.close()
