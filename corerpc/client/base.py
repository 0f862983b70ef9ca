"""Client core: version context, registry lookup and call dispatch."""

from __future__ import annotations

from typing import Any

from loguru import logger

from corerpc.client.call import RpcCall
from corerpc.config.schema import RpcSettings
from corerpc.errors import UnsupportedVersion
from corerpc.registry import DEFAULT_REGISTRY, NODE_VERSION, MethodRegistry
from corerpc.transport.base import Transport
from corerpc.transport.http import HttpTransport
from corerpc.types.network import NodeVersionInfo
from corerpc.version import DaemonVersion, major_from_node_version
from corerpc.wire.codec import DEFAULT_PROTOCOL, ProtocolTag, RequestIds

_SUPPORTED_RANGE = f"{DaemonVersion.oldest().label}-{DaemonVersion.latest().label}"


def _coerce_version(version: DaemonVersion | int | str) -> DaemonVersion:
    try:
        return DaemonVersion.parse(version)
    except ValueError as e:
        raise UnsupportedVersion(None, None, [_SUPPORTED_RANGE], message=str(e)) from e


def negotiate_version(
    transport: Transport,
    *,
    protocol: ProtocolTag = DEFAULT_PROTOCOL,
    request_ids: RequestIds | None = None,
) -> DaemonVersion:
    """
    Ask the daemon for its version through ``getnetworkinfo``.

    Only the fields every release shares are read, so this works before the
    version (and with it the full response shape) is known.

    Raises:
        UnsupportedVersion: the daemon is older or newer than the supported range.
        CoreRpcError: any failure of the ``getnetworkinfo`` call itself.
    """
    ids = request_ids or RequestIds()
    info: NodeVersionInfo = RpcCall(NODE_VERSION, None, ids.next(), protocol=protocol).execute(transport)
    major = major_from_node_version(info.version)
    try:
        version = DaemonVersion(major)
    except ValueError:
        raise UnsupportedVersion(
            "getnetworkinfo",
            None,
            [_SUPPORTED_RANGE],
            message=f"daemon {info.subversion} (version {info.version}) is outside {_SUPPORTED_RANGE}",
        ) from None
    logger.info(f"Negotiated daemon version {version.label} ({info.subversion})")
    return version


def transport_from_settings(settings: RpcSettings) -> HttpTransport:
    return HttpTransport(
        settings.endpoint,
        user=settings.user,
        password=settings.password,
        cookie_file=settings.cookie_file,
        wallet=settings.wallet,
        timeout=settings.timeout,
    )


class ClientBase:
    """
    Dispatches calls for one daemon version over one transport.

    The version is fixed at construction; a client never re-negotiates.
    Safe to share between threads as long as the transport is.
    """

    def __init__(
        self,
        transport: Transport,
        version: DaemonVersion | int | str,
        *,
        registry: MethodRegistry = DEFAULT_REGISTRY,
        protocol: ProtocolTag = DEFAULT_PROTOCOL,
        request_ids: RequestIds | None = None,
    ) -> None:
        self.transport = transport
        self._version = _coerce_version(version)
        self.registry = registry
        self.protocol = protocol
        self._ids = request_ids or RequestIds()

    @property
    def version(self) -> DaemonVersion:
        return self._version

    @classmethod
    def connect(
        cls,
        transport: Transport,
        *,
        registry: MethodRegistry = DEFAULT_REGISTRY,
        protocol: ProtocolTag = DEFAULT_PROTOCOL,
    ):
        """Build a client for whatever version the daemon reports."""
        ids = RequestIds()
        version = negotiate_version(transport, protocol=protocol, request_ids=ids)
        return cls(transport, version, registry=registry, protocol=protocol, request_ids=ids)

    @classmethod
    def from_settings(cls, settings: RpcSettings | None = None):
        """Build an HTTP client from settings; negotiates when no version is configured."""
        settings = settings or RpcSettings()
        transport = transport_from_settings(settings)
        try:
            if settings.daemon_version is None:
                return cls.connect(transport, protocol=settings.protocol)
            return cls(transport, settings.daemon_version, protocol=settings.protocol)
        except Exception:
            transport.close()
            raise

    def supports(self, name: str) -> bool:
        return any(self._version in d.versions for d in self.registry.descriptors(name))

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Call a registered method by name.

        Keyword arguments set to ``None`` count as not given.

        Raises:
            CoreRpcError: exactly one, classified, on any failure.
        """
        descriptor = self.registry.lookup(name, self._version)
        call = RpcCall(descriptor, self._version, self._ids.next(), protocol=self.protocol)
        return call.execute(self.transport, args, kwargs)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
