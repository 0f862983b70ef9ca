"""Loguru helpers for CLI runs."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}


def configure_console_logging(verbose: bool = False) -> None:
    """Route library logs to stderr: debug when verbose, warnings otherwise."""
    sink_id = _SINK_IDS.pop("console", None)
    if sink_id is not None:
        logger.remove(sink_id)
    else:
        # first run: replace loguru's default stderr sink
        logger.remove()
        _SINK_IDS.clear()
    _SINK_IDS["console"] = logger.add(
        lambda message: sys.stderr.write(message),
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level: <8}</level> {message}",
        backtrace=False,
        diagnose=False,
    )


def ensure_rotating_log_file(path: str | Path, level: str = "DEBUG") -> Path:
    """Ensure a rotating log sink writing to ``path``."""
    log_path = Path(path).expanduser()
    key = str(log_path.resolve())
    if key in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[key] = sink_id
    return log_path
