"""Versioned method descriptors and the default lookup table."""

from corerpc.registry.descriptor import Const, MethodDescriptor, Param, between, describe, since
from corerpc.registry.methods import ALL_DESCRIPTORS, SECTIONS
from corerpc.registry.methods.network import NODE_VERSION
from corerpc.registry.table import MethodRegistry, RegistryConsistencyError

DEFAULT_REGISTRY = MethodRegistry(ALL_DESCRIPTORS)

__all__ = [
    "Const",
    "MethodDescriptor",
    "Param",
    "between",
    "describe",
    "since",
    "SECTIONS",
    "NODE_VERSION",
    "MethodRegistry",
    "RegistryConsistencyError",
    "DEFAULT_REGISTRY",
]
