"""Round trips against a running bitcoind.

Point ``CORERPC_URL`` (plus ``CORERPC_COOKIE_FILE`` or ``CORERPC_USER`` and
``CORERPC_PASSWORD``) at a node to run these. Skipped otherwise, and always in CI.
"""

from __future__ import annotations

import os
from decimal import Decimal

import pytest

from corerpc import Client, get_settings
from corerpc.version import DaemonVersion

pytestmark = [
    pytest.mark.requires_node,
    pytest.mark.skipif(not os.environ.get("CORERPC_URL"), reason="CORERPC_URL is not set"),
]


@pytest.fixture
def client():
    with Client.from_settings(get_settings(force_reload=True)) as client:
        yield client


def test_version_is_negotiated(client) -> None:
    assert isinstance(client.version, DaemonVersion)
    assert client.get_network_info().version // 10000 == int(client.version)


def test_tip_header_matches_height(client) -> None:
    height = client.get_block_count()
    header = client.get_block_header(client.get_block_hash(height))
    assert header.height == height
    assert isinstance(header.difficulty, Decimal)


def test_verbose_mempool_is_keyed_by_txid(client) -> None:
    entries = client.get_raw_mempool_verbose()
    assert all(len(txid) == 64 for txid in entries)
