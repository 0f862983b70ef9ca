"""Tests for the corerpc command line."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest
from rich.console import Console
from typer.testing import CliRunner

import corerpc.cli.commands as commands
from conftest import FakeTransport, network_info
from corerpc import __version__
from corerpc.client import Client
from corerpc.version import DaemonVersion

runner = CliRunner()


@pytest.fixture(autouse=True)
def _wide_console(monkeypatch):
    monkeypatch.setattr(commands, "console", Console(width=400))
    for key in ("CORERPC_URL", "CORERPC_VERSION", "CORERPC_WALLET"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "absent.json")]


def _client_with(monkeypatch, *responses) -> FakeTransport:
    transport = FakeTransport(*responses)
    monkeypatch.setattr(
        commands.Client, "from_settings", lambda settings=None: Client(transport, DaemonVersion.V26)
    )
    return transport


def test_parse_value() -> None:
    assert commands.parse_value("800000") == 800000
    assert commands.parse_value("0.1") == Decimal("0.1")
    assert commands.parse_value('{"bc1q": 0.5}') == {"bc1q": Decimal("0.5")}
    assert commands.parse_value("True") is True
    assert commands.parse_value("bc1qexample") == "bc1qexample"
    assert commands.parse_value("  ") == ""


def test_to_jsonable_uses_wire_names() -> None:
    from corerpc.types.util import EstimateSmartFee

    value = EstimateSmartFee(feerate=Decimal("0.00012"), blocks=2)
    assert commands.to_jsonable([value, Decimal("1.50000000")]) == [
        {"feerate": "0.00012", "blocks": 2},
        "1.50000000",
    ]


def test_show_version() -> None:
    result = runner.invoke(commands.app, ["-V"])
    assert result.exit_code == 0
    assert f"corerpc v{__version__}" in result.output


def test_methods_lists_registry() -> None:
    result = runner.invoke(commands.app, ["methods"])
    assert result.exit_code == 0
    assert "getblockcount" in result.output
    assert "getblock_hex" in result.output
    assert "getblock(blockhash, verbosity=0)" in result.output


def test_methods_filtered_by_version() -> None:
    result = runner.invoke(commands.app, ["methods", "--version", "v17"])
    assert result.exit_code == 0
    assert "Methods (v17)" in result.output
    assert "getbalances" not in result.output
    assert "getblockcount" in result.output


def test_methods_rejects_unknown_version() -> None:
    result = runner.invoke(commands.app, ["methods", "--version", "v16"])
    assert result.exit_code != 0


def test_call_prints_result(monkeypatch, no_config) -> None:
    transport = _client_with(monkeypatch, ("result", 800000))
    result = runner.invoke(commands.app, [*no_config, "call", "getblockcount"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output.strip().splitlines()[-1]) == 800000
    assert transport.methods == ["getblockcount"]


def test_call_passes_parsed_params(monkeypatch, no_config) -> None:
    block_hash = "00" * 32
    transport = _client_with(monkeypatch, ("result", block_hash))
    result = runner.invoke(commands.app, [*no_config, "call", "getblockhash", "0"])
    assert result.exit_code == 0, result.output
    assert transport.last_params == [0]
    assert block_hash in result.output


def test_call_reports_classified_errors(monkeypatch, no_config) -> None:
    _client_with(monkeypatch, ("error", -8, "Block height out of range"))
    result = runner.invoke(commands.app, [*no_config, "call", "getblockhash", "99999999"])
    assert result.exit_code == 1
    assert "[APPLICATION_ERROR] Block height out of range" in result.output


def test_call_unknown_method(monkeypatch, no_config) -> None:
    _client_with(monkeypatch)
    result = runner.invoke(commands.app, [*no_config, "call", "getfoo"])
    assert result.exit_code == 1
    assert "[UNSUPPORTED_METHOD] unsupported method: getfoo" in result.output


def test_node_version(monkeypatch, no_config) -> None:
    transport = FakeTransport(("result", network_info(280100, "/Satoshi:28.1.0/")))
    monkeypatch.setattr(commands, "transport_from_settings", lambda settings: transport)
    result = runner.invoke(commands.app, [*no_config, "node-version"])
    assert result.exit_code == 0, result.output
    assert "v28" in result.output
    assert transport.closed


def test_overrides_reach_settings(monkeypatch, no_config) -> None:
    seen = {}

    def from_settings(settings=None):
        seen["settings"] = settings
        return Client(FakeTransport(("result", 1)), settings.daemon_version)

    monkeypatch.setattr(commands.Client, "from_settings", from_settings)
    result = runner.invoke(
        commands.app,
        [*no_config, "--url", "http://10.0.0.5:18443", "--wallet", "hot", "--version", "0.21", "call", "uptime"],
    )
    assert result.exit_code == 0, result.output
    settings = seen["settings"]
    assert settings.endpoint == "http://10.0.0.5:18443"
    assert settings.wallet == "hot"
    assert settings.daemon_version is DaemonVersion.V21
