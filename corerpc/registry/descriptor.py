"""
Method descriptors.

A descriptor ties a method name and an inclusive daemon version range to the
ordered argument slots the daemon expects and the response shape it returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Union

from corerpc.errors import InvalidParameters
from corerpc.mapper import validate_argument
from corerpc.version import DaemonVersion, VersionRange


@dataclass(frozen=True)
class Param:
    """A positional argument slot filled from the caller's arguments."""
    name: str
    kind: Any = Any
    required: bool = False
    # JSON value sent when a later argument forces this slot to be filled
    default: Any = None


@dataclass(frozen=True)
class Const:
    """A slot with a fixed value, e.g. the verbosity of a verbosity variant."""
    name: str
    value: Any


Slot = Union[Param, Const]


@dataclass(frozen=True)
class MethodDescriptor:
    name: str
    versions: VersionRange
    response: Any = None
    params: tuple[Slot, ...] = ()
    rpc_method: str = field(default="")

    def __post_init__(self) -> None:
        if not self.rpc_method:
            object.__setattr__(self, "rpc_method", self.name)
        seen: set[str] = set()
        for slot in self.params:
            if slot.name in seen:
                raise ValueError(f"{self.name}: duplicate parameter slot '{slot.name}'")
            seen.add(slot.name)

    def supports(self, version: DaemonVersion) -> bool:
        return version in self.versions

    @property
    def arguments(self) -> tuple[Param, ...]:
        """Slots a caller may fill, in positional order."""
        return tuple(slot for slot in self.params if isinstance(slot, Param))

    def bind(
        self,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
        *,
        version: DaemonVersion | None = None,
    ) -> list[Any]:
        """
        Build the positional ``params`` list for a call.

        ``None`` means "not given". Gaps before a later given argument are
        filled with the slot default, trailing unset slots are omitted and
        ``Const`` slots are always sent.

        Raises:
            InvalidParameters: surplus, unknown, duplicate or missing
                arguments, or an argument of the wrong kind.
        """
        kwargs = dict(kwargs or {})
        arguments = self.arguments
        if len(args) > len(arguments):
            raise self._invalid(
                f"{self.name} takes at most {len(arguments)} arguments ({len(args)} given)", version
            )

        given: dict[str, Any] = {}
        for param, value in zip(arguments, args):
            if value is not None:
                given[param.name] = value
        argument_names = {param.name for param in arguments}
        const_names = {slot.name for slot in self.params if isinstance(slot, Const)}
        for key, value in kwargs.items():
            if value is None:
                continue
            if key in const_names:
                raise self._invalid(f"{self.name}: '{key}' is fixed and cannot be overridden", version)
            if key not in argument_names:
                raise self._invalid(f"{self.name}: unexpected argument '{key}'", version)
            if key in given:
                raise self._invalid(f"{self.name}: multiple values for argument '{key}'", version)
            given[key] = value

        missing = [param.name for param in arguments if param.required and param.name not in given]
        if missing:
            raise self._invalid(f"{self.name}: missing required argument(s): {', '.join(missing)}", version)

        last = -1
        for index, slot in enumerate(self.params):
            if isinstance(slot, Const) or slot.name in given:
                last = index

        params: list[Any] = []
        for slot in self.params[: last + 1]:
            if isinstance(slot, Const):
                params.append(slot.value)
            elif slot.name in given:
                params.append(
                    validate_argument(
                        given[slot.name], slot.kind, name=slot.name, method=self.name, version=version
                    )
                )
            else:
                params.append(slot.default)
        return params

    def _invalid(self, message: str, version: DaemonVersion | None) -> InvalidParameters:
        return InvalidParameters(message, method=self.name, version=version)


def describe(descriptor: MethodDescriptor) -> str:
    """One-line signature, e.g. ``getblockhash(height) [v17+]``."""
    parts = []
    for slot in descriptor.params:
        if isinstance(slot, Const):
            parts.append(f"{slot.name}={slot.value!r}")
        elif slot.required:
            parts.append(slot.name)
        else:
            parts.append(f"[{slot.name}]")
    return f"{descriptor.rpc_method}({', '.join(parts)}) [{descriptor.versions}]"


def since(first: int) -> VersionRange:
    return VersionRange(DaemonVersion(first))


def between(first: int, last: int) -> VersionRange:
    return VersionRange(DaemonVersion(first), DaemonVersion(last))
