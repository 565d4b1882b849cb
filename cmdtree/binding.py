# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Bindings connect a parameter to the object that receives its value.

A binding is built once, when the command tree is declared, and invoked by the
parser with the bind target of the command that owns the parameter and the
coerced value. The parser never inspects the target itself.

Implementations:
- `AttributeBinding`: `setattr(target, field, value)`, optionally checking the
  target's type.
- `ItemBinding`: `target[key] = value` for dict-like targets.
- `CallbackBinding`: calls `fn(target, value)`.

A target of the wrong type, or a missing target, is a programming error rather
than bad input, so it raises `BindingError` instead of a `ParseError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    MutableMapping,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from cmdtree.exceptions import BindingError
from cmdtree.logger import logger

T = TypeVar("T")


@runtime_checkable
class Binding(Protocol):
    def apply(self, target: Any, value: Any) -> None: ...


@dataclass(frozen=True)
class AttributeBinding(Generic[T]):
    """Assigns the value to `field` on the bind target."""

    field: str
    target_type: type[T] | None = None

    def apply(self, target: Any, value: Any) -> None:
        if target is None:
            raise BindingError(f"No bind target available for field '{self.field}'")
        if self.target_type is not None and not isinstance(target, self.target_type):
            raise BindingError(
                f"Binding for '{self.field}' expects a {self.target_type.__name__} "
                f"target, got {type(target).__name__}"
            )
        logger.debug("Binding %s.%s = %r", type(target).__name__, self.field, value)
        setattr(target, self.field, value)


@dataclass(frozen=True)
class ItemBinding:
    """Stores the value under `key` in a mapping bind target."""

    key: str

    def apply(self, target: Any, value: Any) -> None:
        if not isinstance(target, MutableMapping):
            raise BindingError(
                f"Binding for key '{self.key}' expects a mapping target, "
                f"got {type(target).__name__}"
            )
        logger.debug("Binding [%r] = %r", self.key, value)
        target[self.key] = value


@dataclass(frozen=True)
class CallbackBinding:
    """Hands the bind target and value to a callable."""

    callback: Callable[[Any, Any], None]

    def apply(self, target: Any, value: Any) -> None:
        self.callback(target, value)


def bind(
    destination: str | Callable[[Any, Any], None] | Binding,
    target_type: type | None = None,
) -> Binding:
    """
    Build a binding from a field name, a callable or an existing binding.

    Args:
        destination: A field name, a `(target, value)` callable, or a binding.
        target_type (type | None): Expected bind target type for field bindings.

    Returns:
        Binding: The binding to attach to a parameter.
    """
    if isinstance(destination, Binding):
        return destination
    if isinstance(destination, str):
        if not destination:
            raise BindingError("Binding field name cannot be empty")
        return AttributeBinding(destination, target_type)
    if callable(destination):
        return CallbackBinding(destination)
    raise BindingError(f"Cannot build a binding from {destination!r}")
