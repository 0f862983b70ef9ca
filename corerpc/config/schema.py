"""Connection settings for the daemon's RPC server."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

from corerpc.version import DaemonVersion

Network = Literal["main", "test", "signet", "regtest"]

DEFAULT_PORTS: dict[str, int] = {
    "main": 8332,
    "test": 18332,
    "signet": 38332,
    "regtest": 18443,
}


class RpcSettings(BaseSettings):
    """
    Where and how to reach bitcoind.

    Every field can come from a ``CORERPC_*`` environment variable
    (``CORERPC_URL``, ``CORERPC_WALLET``, ...). Explicit values win.
    """
    url: str | None = None
    host: str = "127.0.0.1"
    network: Network = "main"
    user: str | None = None
    password: str | None = None
    cookie_file: Path | None = None
    wallet: str | None = None
    timeout: float = 30.0
    # major version; negotiated through getnetworkinfo when unset
    version: int | None = None
    protocol: Literal["1.0", "2.0"] = "2.0"

    model_config = ConfigDict(
        env_prefix="CORERPC_",
        extra="ignore",
    )

    @field_validator("version", mode="before")
    @classmethod
    def _parse_version(cls, value: Any) -> int | None:
        if value is None or value == "":
            return None
        return int(DaemonVersion.parse(value))

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @property
    def endpoint(self) -> str:
        """Explicit ``url`` or the network's default local port."""
        if self.url:
            return self.url.rstrip("/")
        return f"http://{self.host}:{DEFAULT_PORTS[self.network]}"

    @property
    def daemon_version(self) -> DaemonVersion | None:
        return DaemonVersion(self.version) if self.version is not None else None
