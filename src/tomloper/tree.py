"""Value model for parsed TOML trees."""

from __future__ import annotations

import datetime
from typing import Annotated, Literal, TypeAlias, Union

from pydantic import (
    BeforeValidator,
    Field,
    PlainValidator,
    Strict,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from typing_extensions import TypeAliasType

from .errors import UnsupportedValueError

INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1

TomlDatetime: TypeAlias = datetime.datetime | datetime.date | datetime.time
TomlScalar: TypeAlias = str | int | float | bool | TomlDatetime


def _exact_float(value: object) -> float:
    # float validators also take ints, which belong to the integer member
    if not isinstance(value, float):
        raise ValueError(f"expected float, got {type(value).__name__}")
    return value


def _tuple_to_list(value: object) -> object:
    if isinstance(value, tuple):
        return list(value)
    return value


_Integer = Annotated[int, Field(strict=True, ge=INTEGER_MIN, le=INTEGER_MAX)]
_Float = Annotated[float, PlainValidator(_exact_float)]
_Datetime = Annotated[datetime.datetime, Strict()]
_Date = Annotated[datetime.date, Strict()]
_Time = Annotated[datetime.time, Strict()]

TomlValue = TypeAliasType(
    "TomlValue",
    "Union[StrictStr, _Integer, _Float, StrictBool, _Datetime, _Date, _Time, "
    "Annotated[list[TomlValue], Strict(), BeforeValidator(_tuple_to_list)], "
    "Annotated[dict[StrictStr, TomlValue], Strict()]]",
)

NodeKind = Literal[
    "table",
    "array",
    "string",
    "integer",
    "float",
    "boolean",
    "datetime",
]
ScalarKind = Literal["string", "integer", "float", "boolean"]

_VALUE_ADAPTER: TypeAdapter[TomlValue] = TypeAdapter(TomlValue)


def kind_of(node: object) -> NodeKind | None:
    """Classify ``node``; ``None`` means it is not a tree value."""

    match node:
        case dict():
            return "table"
        case list():
            return "array"
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case str():
            return "string"
        case datetime.datetime() | datetime.date() | datetime.time():
            return "datetime"
        case _:
            return None


def scalar_kind(value: object) -> ScalarKind | None:
    """Kind of ``value`` when it is one of the scalars defaults may use.

    Integers outside the signed 64-bit range have no kind.
    """

    kind = kind_of(value)
    if kind == "integer" and not INTEGER_MIN <= value <= INTEGER_MAX:  # type: ignore[operator]
        return None
    if kind in ("string", "integer", "float", "boolean"):
        return kind
    return None


def is_table(node: object) -> bool:
    return isinstance(node, dict)


def is_array(node: object) -> bool:
    return isinstance(node, list)


def into_value(obj: object) -> TomlValue:
    """Build a fresh tree value from caller input.

    Tuples become arrays and nested containers are copied. Scalars keep their
    exact kind, so ``True`` stays a boolean and ``1`` stays an integer;
    nothing is converted between kinds.

    Raises ``UnsupportedValueError`` when ``obj`` has no TOML representation,
    including bytes, sets, decimals and integers outside 64 bits.
    """

    if obj is None:
        raise UnsupportedValueError("TOML has no null value")
    try:
        return _VALUE_ADAPTER.validate_python(obj)
    except ValidationError as exc:
        raise UnsupportedValueError(
            f"cannot store {type(obj).__name__} in a TOML tree: {exc}"
        ) from exc


__all__ = [
    "INTEGER_MAX",
    "INTEGER_MIN",
    "NodeKind",
    "ScalarKind",
    "TomlDatetime",
    "TomlScalar",
    "TomlValue",
    "into_value",
    "is_array",
    "is_table",
    "kind_of",
    "scalar_kind",
]
