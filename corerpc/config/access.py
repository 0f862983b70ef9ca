"""
Process-wide settings, loaded once per file and environment.

Library callers go through ``get_settings``. The CLI calls ``load_settings``
directly because its flags apply to a single invocation.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Any

from loguru import logger

from corerpc.config.loader import get_config_path, load_settings
from corerpc.config.schema import RpcSettings

ENV_PREFIX = "CORERPC_"

_Key = tuple[str, frozenset[tuple[str, str]]]


class _SettingsCache:
    """Loaded settings keyed by resolved file path and the ``CORERPC_*`` variables in force."""

    def __init__(self) -> None:
        self._entries: dict[_Key, RpcSettings] = {}
        self._lock = threading.RLock()

    @staticmethod
    def key(config_path: Path | None) -> _Key:
        path = Path(config_path or get_config_path()).expanduser().resolve()
        env = frozenset((k, v) for k, v in os.environ.items() if k.startswith(ENV_PREFIX))
        return str(path), env

    def get(self, config_path: Path | None, *, reload: bool) -> RpcSettings:
        key = self.key(config_path)
        with self._lock:
            settings = None if reload else self._entries.get(key)
            if settings is None:
                settings = load_settings(Path(key[0]))
                self._entries[key] = settings
                logger.debug(f"Loaded settings from {key[0]}")
            return settings

    def drop(self, config_path: Path | None) -> None:
        with self._lock:
            if config_path is None:
                self._entries.clear()
                return
            path = self.key(config_path)[0]
            for key in [k for k in self._entries if k[0] == path]:
                del self._entries[key]


_cache = _SettingsCache()


def get_settings(
    *,
    config_path: Path | None = None,
    force_reload: bool = False,
    **overrides: Any,
) -> RpcSettings:
    """
    Settings from ``config_path`` (default ``~/.corerpc/config.json``) and the environment.

    A changed ``CORERPC_*`` variable yields a fresh load; an edited file
    needs ``force_reload``. Non-``None`` ``overrides`` (``wallet="hot"``)
    are validated into a copy, the cached instance is left alone.

    Raises:
        ValueError: the file is invalid, or an override names no setting or fails validation.
    """
    settings = _cache.get(config_path, reload=force_reload)
    given = {k: v for k, v in overrides.items() if v is not None}
    if not given:
        return settings
    unknown = sorted(set(given) - set(RpcSettings.model_fields))
    if unknown:
        raise ValueError(f"unknown setting(s): {', '.join(unknown)}")
    return RpcSettings(**{**settings.model_dump(exclude_unset=True), **given})


def clear_settings_cache(*, config_path: Path | None = None) -> None:
    """Forget the settings loaded for ``config_path``, or for every file."""
    _cache.drop(config_path)
