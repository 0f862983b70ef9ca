"""Tests for corerpc.transport.http."""

from __future__ import annotations

import base64

import httpx
import pytest

from corerpc.errors import TransportKind
from corerpc.transport import HttpTransport, Transport, TransportFailure, read_cookie_file


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def _basic(user: str, password: str) -> str:
    return "Basic " + base64.b64encode(f"{user}:{password}".encode()).decode()


def test_posts_payload_with_basic_auth() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b'{"result":1,"error":null,"id":1}')

    transport = HttpTransport("http://127.0.0.1:8332/", user="alice", password="secret", client=_client(handler))
    body = transport.send(b'{"method":"getblockcount"}')

    assert body == b'{"result":1,"error":null,"id":1}'
    request = seen[0]
    assert request.method == "POST"
    assert request.url.host == "127.0.0.1"
    assert request.url.port == 8332
    assert request.headers["content-type"] == "application/json"
    assert request.headers["authorization"] == _basic("alice", "secret")
    assert request.content == b'{"method":"getblockcount"}'
    assert isinstance(transport, Transport)


def test_wallet_endpoint_is_quoted() -> None:
    paths: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.raw_path)
        return httpx.Response(200, content=b"{}")

    transport = HttpTransport("http://127.0.0.1:8332", wallet="my wallet", client=_client(handler))
    transport.send(b"{}")
    assert transport.endpoint == "http://127.0.0.1:8332/wallet/my%20wallet"
    assert paths == [b"/wallet/my%20wallet"]


def test_cookie_file_credentials(tmp_path) -> None:
    cookie = tmp_path / ".cookie"
    cookie.write_text("__cookie__:abc123\n", encoding="utf-8")
    headers: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        headers.append(request.headers["authorization"])
        return httpx.Response(200, content=b"{}")

    transport = HttpTransport("http://127.0.0.1:8332", cookie_file=cookie, client=_client(handler))
    transport.send(b"{}")
    assert headers == [_basic("__cookie__", "abc123")]


def test_read_cookie_file_errors(tmp_path) -> None:
    with pytest.raises(ValueError, match="Cannot read"):
        read_cookie_file(tmp_path / "missing")
    bad = tmp_path / ".cookie"
    bad.write_text("no-separator", encoding="utf-8")
    with pytest.raises(ValueError, match="user:password"):
        read_cookie_file(bad)
    assert read_cookie_file(_write(tmp_path / "ok", "u:p")) == ("u", "p")


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.parametrize("status", [401, 403])
def test_rejected_credentials(status) -> None:
    transport = HttpTransport(
        "http://127.0.0.1:8332", user="alice", password="wrong",
        client=_client(lambda request: httpx.Response(status)),
    )
    with pytest.raises(TransportFailure) as exc:
        transport.send(b"{}")
    assert exc.value.kind is TransportKind.UNAUTHORIZED
    assert exc.value.status == status
    assert "wrong" not in exc.value.message


def test_error_status_keeps_body() -> None:
    body = b'{"result":null,"error":{"code":-8,"message":"Block height out of range"},"id":1}'
    transport = HttpTransport(
        "http://127.0.0.1:8332", client=_client(lambda request: httpx.Response(500, content=body))
    )
    with pytest.raises(TransportFailure) as exc:
        transport.send(b"{}")
    assert exc.value.kind is TransportKind.HTTP_STATUS
    assert exc.value.status == 500
    assert exc.value.body == body
    assert "Block height out of range" in exc.value.message


@pytest.mark.parametrize(
    "error, kind",
    [
        (httpx.ConnectError("[Errno 111] Connection refused"), TransportKind.CONNECTION_REFUSED),
        (httpx.ReadTimeout("timed out"), TransportKind.TIMEOUT),
        (httpx.RemoteProtocolError("peer closed connection"), TransportKind.NETWORK),
    ],
)
def test_request_errors(error, kind) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    transport = HttpTransport("http://127.0.0.1:8332", client=_client(handler))
    with pytest.raises(TransportFailure) as exc:
        transport.send(b"{}")
    assert exc.value.kind is kind


def test_close_leaves_injected_client_open() -> None:
    client = _client(lambda request: httpx.Response(200, content=b"{}"))
    with HttpTransport("http://127.0.0.1:8332", client=client):
        pass
    assert not client.is_closed

    owned = HttpTransport("http://127.0.0.1:8332")
    owned.close()
    assert owned._client.is_closed
