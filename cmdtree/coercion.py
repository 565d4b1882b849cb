# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion for cmdtree parameters.

`coerce()` converts one raw argument into the typed value declared by a
`ValueType`, raising a `ParseError` that names the parameter, the raw text and
the command path when it cannot.

Failure channels:
- `InvalidValueTypeError`: the text is not a literal of the base type
  (`"two"` for an int, `"yes"` for a bool, a custom conversion returning None).
- `InvalidValueError`: the text parsed but a declared constraint rejected it
  (an int outside its range, a date that does not fit its format).

Array values are split on `,` with no escaping and each piece is coerced as the
element type; the first failing element raises with the element's own text.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING, Any, Sequence

from dateutil import parser as date_parser

from cmdtree.exceptions import (
    CommandDefinitionError,
    InvalidValueError,
    InvalidValueTypeError,
)
from cmdtree.value_type import (
    ArrayType,
    BoolType,
    CustomType,
    DateType,
    DoubleType,
    IntType,
    StringType,
    ToggleType,
    ValueType,
)

if TYPE_CHECKING:
    from cmdtree.command import Command
    from cmdtree.parameter import Parameter

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def coerce_int(raw: str) -> int | None:
    """Parse a strict integer literal, returning None when `raw` is not one."""
    if not _INT_LITERAL.fullmatch(raw):
        return None
    return int(raw)


def coerce_double(raw: str) -> float | None:
    if raw != raw.strip() or "_" in raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def coerce_bool(raw: str) -> bool | None:
    """Accept exactly `true` or `false`."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def coerce_date(raw: str, format: str | None) -> datetime | None:  # noqa: A002
    try:
        if format is None:
            return date_parser.parse(raw)
        return datetime.strptime(raw, format)
    except (ValueError, OverflowError):
        return None


def split_array(raw: str) -> list[str]:
    """Split an array value on commas, dropping empty pieces."""
    return [piece for piece in raw.split(",") if piece]


def coerce(
    raw: str,
    value_type: ValueType,
    parameter: Parameter,
    path: Sequence[Command] = (),
) -> Any:
    """
    Convert `raw` to the value declared by `value_type`.

    Args:
        raw (str): The argument text.
        value_type (ValueType): The declared type.
        parameter (Parameter): The parameter being filled, used in errors.
        path (Sequence[Command]): Commands matched so far, used in errors.

    Returns:
        Any: The typed value.

    Raises:
        InvalidValueTypeError: If `raw` is not a literal of the base type.
        InvalidValueError: If `raw` violates a declared constraint.
        CommandDefinitionError: If asked to coerce text for a toggle.
    """
    if isinstance(value_type, ArrayType):
        return [
            _coerce_scalar(piece, value_type.element, parameter, path)
            for piece in split_array(raw)
        ]
    return _coerce_scalar(raw, value_type, parameter, path)


def _coerce_scalar(
    raw: str,
    value_type: ValueType,
    parameter: Parameter,
    path: Sequence[Command],
) -> Any:
    if isinstance(value_type, StringType):
        return raw

    if isinstance(value_type, IntType):
        number = coerce_int(raw)
        if number is None:
            raise InvalidValueTypeError(parameter, raw, path)
        if not value_type.contains(number):
            raise InvalidValueError(parameter, raw, path)
        return number

    if isinstance(value_type, DoubleType):
        double = coerce_double(raw)
        if double is None:
            raise InvalidValueTypeError(parameter, raw, path)
        return double

    if isinstance(value_type, BoolType):
        flag = coerce_bool(raw)
        if flag is None:
            raise InvalidValueTypeError(parameter, raw, path)
        return flag

    if isinstance(value_type, DateType):
        date = coerce_date(raw, value_type.format)
        if date is None:
            raise InvalidValueError(parameter, raw, path)
        return date

    if isinstance(value_type, CustomType):
        try:
            value = value_type.convert(raw)
        except (ValueError, TypeError) as error:
            raise InvalidValueTypeError(parameter, raw, path) from error
        if value is None:
            raise InvalidValueTypeError(parameter, raw, path)
        return value

    if isinstance(value_type, ToggleType):
        raise CommandDefinitionError(
            f"{parameter.usage_token} is a toggle and takes no value"
        )

    raise CommandDefinitionError(f"Unsupported value type: {value_type!r}")
