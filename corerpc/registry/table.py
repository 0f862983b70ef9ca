"""Version-aware lookup over the descriptor tables."""

from __future__ import annotations

from collections import defaultdict
from types import MappingProxyType
from typing import Iterable, Iterator

from corerpc.errors import UnsupportedMethod, UnsupportedVersion
from corerpc.registry.descriptor import MethodDescriptor
from corerpc.version import DaemonVersion


class RegistryConsistencyError(ValueError):
    """Two descriptors for one name claim the same daemon version."""


class MethodRegistry:
    """
    Immutable table from method name to its versioned descriptors.

    Built once; lookups need no locking.
    """

    def __init__(self, descriptors: Iterable[MethodDescriptor]):
        grouped: dict[str, list[MethodDescriptor]] = defaultdict(list)
        for descriptor in descriptors:
            for existing in grouped[descriptor.name]:
                if existing.versions.overlaps(descriptor.versions):
                    raise RegistryConsistencyError(
                        f"{descriptor.name}: ranges {existing.versions} and "
                        f"{descriptor.versions} overlap"
                    )
            grouped[descriptor.name].append(descriptor)
        self._table = MappingProxyType({
            name: tuple(sorted(entries, key=lambda d: d.versions.first))
            for name, entries in grouped.items()
        })

    def lookup(self, name: str, version: DaemonVersion) -> MethodDescriptor:
        """
        Resolve the descriptor for ``name`` on ``version``.

        Raises:
            UnsupportedMethod: no descriptor has this name.
            UnsupportedVersion: none of the name's ranges covers ``version``.
        """
        entries = self._table.get(name)
        if not entries:
            raise UnsupportedMethod(name, version)
        for descriptor in entries:
            if version in descriptor.versions:
                return descriptor
        raise UnsupportedVersion(name, version, [str(d.versions) for d in entries])

    def descriptors(self, name: str) -> tuple[MethodDescriptor, ...]:
        return self._table.get(name, ())

    def names(self) -> list[str]:
        return sorted(self._table)

    def supported(self, version: DaemonVersion) -> list[str]:
        """Names callable on ``version``."""
        return [
            name for name, entries in sorted(self._table.items())
            if any(version in d.versions for d in entries)
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[MethodDescriptor]:
        for name in sorted(self._table):
            yield from self._table[name]

    def __len__(self) -> int:
        return len(self._table)
