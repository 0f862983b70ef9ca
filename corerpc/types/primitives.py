"""Wire primitives shared by every response shape.

Scalars are strict: the daemon's JSON is decoded losslessly by the codec, so
an integer field arriving as a string (or a decimal) is an encoding
violation, not something to coerce. Amounts are the exception: depending on
version and method the daemon sends them as JSON numbers or as decimal
strings, and both decode to the same ``Decimal``.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictBool,
    StrictInt,
    StrictStr,
    StringConstraints,
)
from pydantic_core import PydanticCustomError

_AMOUNT_PATTERN = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _to_amount(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise PydanticCustomError("amount_type", "amount must be a number or a decimal string")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise PydanticCustomError("amount_parsing", "amount must be finite")
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        text = value.strip()
        if not _AMOUNT_PATTERN.fullmatch(text):
            raise PydanticCustomError("amount_parsing", "amount string '{value}' is not a decimal", {"value": value})
        try:
            return Decimal(text)
        except InvalidOperation as e:
            raise PydanticCustomError("amount_parsing", "amount string '{value}' is not a decimal", {"value": value}) from e
    raise PydanticCustomError("amount_type", "amount must be a number or a decimal string")


def _to_number(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise PydanticCustomError("number_type", "value must be a JSON number")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


# BTC amounts: JSON number or decimal string, always Decimal in Python.
Amount = Annotated[Decimal, BeforeValidator(_to_amount)]
# Non-monetary fractional values (difficulty, progress, rates).
Number = Annotated[Decimal, BeforeValidator(_to_number)]

Int = StrictInt
Str = StrictStr
Bool = StrictBool

Hex = Annotated[str, StringConstraints(strict=True, pattern=r"^(?:[0-9a-fA-F]{2})*$")]
Hash256 = Annotated[str, StringConstraints(strict=True, pattern=r"^[0-9a-fA-F]{64}$")]
BlockHash = Hash256
Txid = Hash256

JsonObject = dict[str, Any]


class RpcModel(BaseModel):
    """Base for response shapes: immutable, tolerant of surplus fields."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        """Dump using the daemon's field names; ``None`` markers are dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
