# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Parameter`, one bindable slot of a command, and `ParameterKind`.

A parameter is either tagged (matched by `-token`), required (positional, must be
present) or optional (positional, may be omitted). Toggles are tagged-only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from cmdtree.binding import Binding, bind
from cmdtree.exceptions import CommandDefinitionError
from cmdtree.value_type import STRING, ValueType


class ParameterKind(Enum):
    """How a parameter is located in the argument list."""

    TAGGED = "tagged"
    REQUIRED = "required"
    OPTIONAL = "optional"

    @property
    def positional(self) -> bool:
        return self is not ParameterKind.TAGGED

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Parameter:
    """
    Represents one declared parameter.

    Attributes:
        token (str): Name matched on the command line and shown in usage.
        kind (ParameterKind): Tagged, required or optional.
        type (ValueType): Declared value type.
        binding (Binding): Receives the coerced value.
        description (str): Help text.
    """

    token: str
    kind: ParameterKind
    type: ValueType
    binding: Binding
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token:
            raise CommandDefinitionError("Parameter token must be a non-empty string")
        if self.kind is ParameterKind.TAGGED and self.token.startswith("-"):
            raise CommandDefinitionError(
                f"Tagged parameter '{self.token}' must be declared without dashes"
            )
        if not isinstance(self.type, ValueType):
            raise CommandDefinitionError(
                f"Parameter '{self.token}' has invalid type {self.type!r}"
            )
        if self.kind.positional and self.type.is_toggle:
            raise CommandDefinitionError(
                f"Untagged parameter '{self.token}' cannot be a toggle"
            )
        if self.binding is None:
            raise CommandDefinitionError(f"Parameter '{self.token}' has no binding")

    @classmethod
    def create(
        cls,
        token: str,
        kind: ParameterKind,
        binding: Any,
        type: ValueType = STRING,  # noqa: A002
        description: str = "",
        target_type: type | None = None,
    ) -> Parameter:
        """Build a parameter, turning `binding` into a `Binding` via `bind()`."""
        return cls(
            token=token,
            kind=kind,
            type=type,
            binding=bind(binding, target_type),
            description=description,
        )

    @property
    def usage_token(self) -> str:
        if self.kind is ParameterKind.TAGGED:
            return f"-{self.token}"
        if self.kind is ParameterKind.REQUIRED:
            return f"<{self.token}>"
        return f"[{self.token}]"

    def assign(self, target: Any, value: Any) -> None:
        self.binding.apply(target, value)

    def __repr__(self) -> str:
        return f"Parameter({self.usage_token}, type={self.type.name})"
