# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declared value types for cmdtree parameters.

`ValueType` is a closed family of frozen dataclasses. Each parameter carries one
of them and `cmdtree.coercion.coerce` turns raw argument text into a typed value
according to it.

Variants:
- `StringType`: the raw text, unchanged.
- `IntType`: an integer, optionally restricted to an inclusive range.
- `DoubleType`: a float.
- `BoolType`: the literals `true` / `false` only.
- `DateType`: a `datetime`, parsed with a `strptime` format or free-form.
- `ArrayType`: comma-separated values of a single, non-array element type.
- `ToggleType`: a presence-only switch (`-verbose` / `-noverbose`).
- `CustomType`: a user conversion returning `None` to reject a value.

Example:
    ValueType.int((1, 10))
    ValueType.array(ValueType.double())
    ValueType.custom(lambda text: Path(text) if text else None)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from cmdtree.exceptions import CommandDefinitionError


class ValueType:
    """Base class and factory namespace for all value types."""

    name: str = "value"

    @property
    def is_toggle(self) -> bool:
        return isinstance(self, ToggleType)

    @staticmethod
    def string() -> StringType:
        return STRING

    @staticmethod
    def int(range: tuple[int, int] | range | None = None) -> IntType:  # noqa: A002
        return IntType(range=_normalize_range(range))

    @staticmethod
    def double() -> DoubleType:
        return DOUBLE

    @staticmethod
    def bool() -> BoolType:
        return BOOL

    @staticmethod
    def date(format: str | None = None) -> DateType:  # noqa: A002
        return DateType(format=format)

    @staticmethod
    def array(element: ValueType) -> ArrayType:
        return ArrayType(element=element)

    @staticmethod
    def toggle() -> ToggleType:
        return TOGGLE

    @staticmethod
    def custom(convert: Callable[[str], Any], name: str = "custom") -> CustomType:
        return CustomType(convert=convert, name=name)


def _normalize_range(value: tuple[int, int] | range | None) -> tuple[int, int] | None:
    if value is None:
        return None
    if isinstance(value, range):
        if value.step != 1 or len(value) == 0:
            raise CommandDefinitionError(f"Unsupported int range: {value!r}")
        return (value.start, value.stop - 1)
    try:
        low, high = value
    except (TypeError, ValueError):
        raise CommandDefinitionError(
            f"int range must be a (low, high) pair, got {value!r}"
        ) from None
    if low > high:
        raise CommandDefinitionError(f"int range is empty: ({low}, {high})")
    return (low, high)


@dataclass(frozen=True)
class StringType(ValueType):
    name: str = field(default="string", init=False)


@dataclass(frozen=True)
class IntType(ValueType):
    range: tuple[int, int] | None = None
    name: str = field(default="int", init=False)

    def contains(self, value: int) -> bool:
        if self.range is None:
            return True
        low, high = self.range
        return low <= value <= high


@dataclass(frozen=True)
class DoubleType(ValueType):
    name: str = field(default="double", init=False)


@dataclass(frozen=True)
class BoolType(ValueType):
    name: str = field(default="bool", init=False)


@dataclass(frozen=True)
class DateType(ValueType):
    """A date value. `format=None` accepts any date `dateutil` understands."""

    format: str | None = None
    name: str = field(default="date", init=False)


@dataclass(frozen=True)
class ArrayType(ValueType):
    element: ValueType = field(default_factory=StringType)
    name: str = field(default="array", init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.element, ValueType):
            raise CommandDefinitionError(
                f"array element must be a ValueType, got {self.element!r}"
            )
        if isinstance(self.element, ArrayType):
            raise CommandDefinitionError("array elements cannot be arrays")
        if isinstance(self.element, ToggleType):
            raise CommandDefinitionError("array elements cannot be toggles")


@dataclass(frozen=True)
class ToggleType(ValueType):
    name: str = field(default="toggle", init=False)


@dataclass(frozen=True)
class CustomType(ValueType):
    convert: Callable[[str], Any] = field(default=lambda text: text)
    name: str = "custom"

    def __post_init__(self) -> None:
        if not callable(self.convert):
            raise CommandDefinitionError("custom conversion must be callable")


STRING = StringType()
DOUBLE = DoubleType()
BOOL = BoolType()
TOGGLE = ToggleType()
