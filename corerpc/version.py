"""Daemon version context.

Bitcoin Core reports its version through ``getnetworkinfo`` as a single
integer (``170100`` is 0.17.1, ``260000`` is 26.0). Only the major version
selects response shapes, so that is all this module tracks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class DaemonVersion(IntEnum):
    """Supported Bitcoin Core major versions."""
    V17 = 17
    V18 = 18
    V19 = 19
    V20 = 20
    V21 = 21
    V22 = 22
    V23 = 23
    V24 = 24
    V25 = 25
    V26 = 26
    V27 = 27
    V28 = 28
    V29 = 29

    @property
    def label(self) -> str:
        return f"v{self.value}"

    @classmethod
    def latest(cls) -> DaemonVersion:
        return max(cls)

    @classmethod
    def oldest(cls) -> DaemonVersion:
        return min(cls)

    @classmethod
    def parse(cls, value: int | str | DaemonVersion) -> DaemonVersion:
        """
        Accept a major number (``26``), a label (``"v26"``, ``"26"``, ``"0.17"``)
        or a full node version integer (``260100``).

        Raises ValueError for anything outside the supported range.
        """
        if isinstance(value, DaemonVersion):
            return value
        if isinstance(value, bool):
            raise ValueError(f"invalid daemon version: {value!r}")
        if isinstance(value, str):
            text = value.strip().lower().lstrip("v")
            if text.startswith("0."):
                text = text[2:]
            text = text.split(".", 1)[0]
            if not text.isdigit():
                raise ValueError(f"invalid daemon version: {value!r}")
            value = int(text)
        major = major_from_node_version(value) if value >= 10000 else value
        try:
            return cls(major)
        except ValueError:
            raise ValueError(
                f"unsupported daemon version {value!r} "
                f"(supported: {cls.oldest().label}-{cls.latest().label})"
            ) from None


def major_from_node_version(node_version: int) -> int:
    """Major version from the ``version`` integer of ``getnetworkinfo``."""
    if node_version < 0:
        raise ValueError(f"invalid node version: {node_version}")
    return node_version // 10000


@dataclass(frozen=True)
class VersionRange:
    """Inclusive range of daemon versions; open-ended when ``last`` is None."""
    first: DaemonVersion
    last: DaemonVersion | None = None

    def __post_init__(self) -> None:
        if self.last is not None and self.last < self.first:
            raise ValueError(f"empty version range: {self.first.label}-{self.last.label}")

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, DaemonVersion):
            return False
        if version < self.first:
            return False
        return self.last is None or version <= self.last

    @property
    def upper(self) -> DaemonVersion:
        return self.last if self.last is not None else DaemonVersion.latest()

    def overlaps(self, other: VersionRange) -> bool:
        return self.first <= other.upper and other.first <= self.upper

    def versions(self) -> list[DaemonVersion]:
        return [v for v in DaemonVersion if v in self]

    def __str__(self) -> str:
        if self.last is None:
            return f"{self.first.label}+"
        if self.last == self.first:
            return self.first.label
        return f"{self.first.label}-{self.last.label}"
