"""Pytest hooks and fixtures."""

import json
import os
from decimal import Decimal
from typing import Any

import pytest


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "requires_node: talks to a running bitcoind (skipped in CI)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip requires_node tests when running in CI (no daemon available)."""
    if os.environ.get("CI") != "true":
        return
    skip = pytest.mark.skip(reason="Requires a running bitcoind (skipped in CI)")
    for item in items:
        if "requires_node" in item.keywords:
            item.add_marker(skip)


class FakeTransport:
    """Answers each request from a script, echoing the request id.

    Script entries are ``("result", value)``, ``("error", code, message)``,
    ``("raw", bytes)`` for a verbatim body, or an exception instance to raise.
    """

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    def send(self, payload: bytes) -> bytes:
        request = json.loads(payload)
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"unexpected request: {request['method']}")
        entry = self.responses.pop(0)
        if isinstance(entry, BaseException):
            raise entry
        if entry[0] == "raw":
            return entry[1]
        if entry[0] == "error":
            return envelope(request["id"], error={"code": entry[1], "message": entry[2]})
        return envelope(request["id"], result=entry[1])

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def methods(self) -> list[str]:
        return [r["method"] for r in self.requests]

    @property
    def last_params(self) -> list[Any]:
        return self.requests[-1]["params"]


def _as_number(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"cannot encode {type(value).__name__}")


def envelope(request_id: Any, *, result: Any = None, error: dict[str, Any] | None = None) -> bytes:
    """Response body in the daemon's legacy shape (``result`` plus ``error``).

    Decimals are written as JSON numbers, the way the daemon sends amounts.
    """
    body = {"result": result, "error": error, "id": request_id}
    return json.dumps(body, default=_as_number).encode("utf-8")


def network_info(version: int = 260000, subversion: str = "/Satoshi:26.0.0/") -> dict[str, Any]:
    return {"version": version, "subversion": subversion, "protocolversion": 70016}

