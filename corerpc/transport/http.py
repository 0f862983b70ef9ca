"""HTTP transport for bitcoind's RPC server."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

import httpx
from loguru import logger

from corerpc.errors import TransportKind
from corerpc.transport.base import TransportFailure

DEFAULT_TIMEOUT = 30.0
COOKIE_USER = "__cookie__"


def read_cookie_file(path: str | Path) -> tuple[str, str]:
    """Read ``user:password`` from the daemon's ``.cookie`` file."""
    cookie_path = Path(path).expanduser()
    try:
        content = cookie_path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise ValueError(f"Cannot read cookie file {cookie_path}: {e}") from e
    user, sep, password = content.partition(":")
    if not sep or not user:
        raise ValueError(f"Cookie file {cookie_path} is not in 'user:password' form")
    return user, password


class HttpTransport:
    """
    Blocking JSON-RPC over HTTP POST.

    One ``httpx.Client`` is kept for the lifetime of the transport so
    connections are reused; call ``close()`` (or use ``with``) when done.
    """

    def __init__(
        self,
        url: str,
        *,
        user: str | None = None,
        password: str | None = None,
        cookie_file: str | Path | None = None,
        wallet: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.wallet = wallet
        self.timeout = timeout
        if user is None and cookie_file is not None:
            user, password = read_cookie_file(cookie_file)
        self._auth = httpx.BasicAuth(user, password or "") if user is not None else None
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    @property
    def endpoint(self) -> str:
        if self.wallet:
            return f"{self.url}/wallet/{quote(self.wallet, safe='')}"
        return self.url

    def send(self, payload: bytes) -> bytes:
        endpoint = self.endpoint
        try:
            resp = self._client.post(
                endpoint,
                content=payload,
                headers={"Content-Type": "application/json"},
                auth=self._auth,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as exc:
            raise TransportFailure(TransportKind.TIMEOUT, f"timeout after {self.timeout}s: {endpoint}") from exc
        except httpx.ConnectError as exc:
            raise TransportFailure(
                TransportKind.CONNECTION_REFUSED, f"cannot connect to {endpoint}: {exc}"
            ) from exc
        except httpx.RequestError as exc:
            raise TransportFailure(TransportKind.NETWORK, f"network error: {endpoint}: {exc}") from exc

        status_code = resp.status_code
        if status_code in (401, 403):
            raise TransportFailure(
                TransportKind.UNAUTHORIZED,
                f"http {status_code}: credentials rejected by {self.url}",
                status=status_code,
            )
        if status_code >= 400:
            logger.debug(f"RPC endpoint answered http {status_code} ({len(resp.content)} bytes)")
            raise TransportFailure(
                TransportKind.HTTP_STATUS,
                f"http error {status_code}: {self._extract_error_message(resp)}",
                status=status_code,
                body=resp.content,
            )
        return resp.content

    @staticmethod
    def _extract_error_message(resp: httpx.Response) -> str:
        text = (resp.text or "").strip()
        if text:
            return text[:200]
        return resp.reason_phrase or "request failed"

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
