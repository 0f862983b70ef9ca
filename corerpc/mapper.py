"""
Raw JSON to typed values.

Shapes are any type expression pydantic understands (a response model, a
primitive such as ``Amount``, ``list[Txid]``, ``None`` for methods that
return nothing). Validation failures are translated into the corerpc
taxonomy so callers never see a pydantic exception.
"""

from __future__ import annotations

import threading
from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from corerpc.errors import CoreRpcError, InvalidParameters, MissingField, TypeMismatch
from corerpc.types.primitives import json_kind
from corerpc.version import DaemonVersion

_ADAPTERS: dict[Any, TypeAdapter] = {}
_ADAPTERS_LOCK = threading.Lock()

ROOT_FIELD = "result"

_EXPECTED_BY_ERROR_TYPE = {
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "string_type": "string",
    "string_pattern_mismatch": "hex string",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "amount_type": "amount",
    "amount_parsing": "amount",
    "number_type": "number",
    "decimal_type": "number",
    "decimal_parsing": "number",
    "list_type": "array",
    "tuple_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "none_required": "null",
    "literal_error": "literal",
}


def adapter_for(shape: Any) -> TypeAdapter:
    """Return a (cached) TypeAdapter for a shape."""
    try:
        hash(shape)
    except TypeError:
        return TypeAdapter(shape)
    with _ADAPTERS_LOCK:
        adapter = _ADAPTERS.get(shape)
        if adapter is None:
            adapter = TypeAdapter(shape)
            _ADAPTERS[shape] = adapter
        return adapter


_PRIMITIVE_TAGS = frozenset({"bool", "int", "str", "float", "decimal", "none", "any"})
_COMPOUND_TAG_PREFIXES = (
    "function-", "constrained-", "lax-or-strict", "json-or-python", "tagged-union", "nullable",
    "is-instance", "literal[", "list[", "dict[", "tuple[", "set[",
)


def _is_union_tag(part: str) -> bool:
    # pydantic names the union member a nested error came from: "bool",
    # "ScanningDetails", "function-before[...]". Wire names such as
    # "bip125-replaceable" start lowercase and carry no such prefix.
    return part in _PRIMITIVE_TAGS or part[:1].isupper() or part.startswith(_COMPOUND_TAG_PREFIXES)


def _field_parts(loc: tuple[Any, ...]) -> list[Any]:
    return [part for part in loc if isinstance(part, int) or not _is_union_tag(str(part))]


def format_loc(loc: tuple[Any, ...]) -> str:
    """Render a pydantic error location with wire names: ``vout[0].scriptPubKey``."""
    path = ""
    for part in _field_parts(loc):
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or ROOT_FIELD


def translate_validation_error(
    exc: ValidationError,
    *,
    method: str | None = None,
    version: DaemonVersion | None = None,
) -> CoreRpcError:
    """
    Turn a pydantic error into MissingField or TypeMismatch.

    A union reports one error per member. An absent field inside the member
    that matched the JSON kind wins, then the error reaching deepest into it.
    """
    errors = exc.errors(include_url=False)
    if not errors:
        return TypeMismatch(ROOT_FIELD, "valid value", "invalid", method=method, version=version)
    chosen = next((e for e in errors if e["type"] == "missing"), None)
    if chosen is None:
        chosen = max(errors, key=lambda e: len(_field_parts(tuple(e.get("loc", ())))))
    field = format_loc(tuple(chosen.get("loc", ())))
    if chosen["type"] == "missing":
        return MissingField(field, method=method, version=version)
    expected = _EXPECTED_BY_ERROR_TYPE.get(chosen["type"], chosen.get("msg", chosen["type"]))
    return TypeMismatch(field, expected, json_kind(chosen.get("input")), method=method, version=version)


def map_result(
    raw: Any,
    shape: Any,
    *,
    method: str | None = None,
    version: DaemonVersion | None = None,
) -> Any:
    """
    Validate a decoded ``result`` against ``shape``.

    Raises:
        MissingField: a required field is absent.
        TypeMismatch: a field is present with the wrong JSON kind.
    """
    try:
        return adapter_for(shape).validate_python(raw)
    except ValidationError as e:
        error = translate_validation_error(e, method=method, version=version)
        logger.debug(f"Result of {method} rejected by shape: {error.message}")
        raise error from e


def validate_argument(
    value: Any,
    kind: Any,
    *,
    name: str,
    method: str | None = None,
    version: DaemonVersion | None = None,
) -> Any:
    """
    Check one call argument against its declared kind and return its JSON form.

    Raises:
        InvalidParameters: the value is not of the declared kind (no RPC code).
    """
    adapter = adapter_for(kind)
    try:
        validated = adapter.validate_python(value)
    except ValidationError as e:
        error = translate_validation_error(e, method=method, version=version)
        detail = error.details.get("expected") or error.message
        raise InvalidParameters(
            f"argument '{name}' must be {detail}, got {json_kind(value)}",
            method=method,
            version=version,
        ) from e
    return adapter.dump_python(validated, mode="json")
