# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Argument preprocessing and the token cursor used by the parser.

`prepare()` runs once per parse:
- Everything after the first literal `--` becomes the remainder, untouched.
- `--tag` is folded to `-tag`.
- `-tag=value` is split into `-tag` and `value` at the first `=`, unless the `=`
  is the last character of the token.

`TokenStream` is a read cursor over the normalized tokens. `peek()` never moves
the cursor, so option matching can look at the front token without consuming it.
"""
from __future__ import annotations

from typing import Iterable

TERMINATOR = "--"


def normalize(token: str) -> list[str]:
    """Fold a double dash and split an inline `=value`."""
    if token.startswith("--"):
        token = token[1:]
    if token.startswith("-"):
        index = token.find("=")
        if 0 <= index < len(token) - 1:
            return [token[:index], token[index + 1 :]]
    return [token]


def prepare(arguments: Iterable[str]) -> tuple[TokenStream, list[str]]:
    """
    Split the raw arguments into a token stream and a terminator remainder.

    Args:
        arguments (Iterable[str]): Raw argument list, program name excluded.

    Returns:
        tuple[TokenStream, list[str]]: The normalized tokens and everything
        after the first `--`.
    """
    arguments = list(arguments)
    try:
        split = arguments.index(TERMINATOR)
    except ValueError:
        split = len(arguments)
    remainder = arguments[split + 1 :]
    tokens = [piece for argument in arguments[:split] for piece in normalize(argument)]
    return TokenStream(tokens), remainder


class TokenStream:
    """Forward-only cursor over normalized tokens."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: list[str] = list(tokens)
        self._position: int = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def empty(self) -> bool:
        return self._position >= len(self._tokens)

    def peek(self) -> str:
        if self.empty:
            raise IndexError("peek from an exhausted token stream")
        return self._tokens[self._position]

    def pop(self) -> str:
        token = self.peek()
        self._position += 1
        return token

    def remaining(self) -> list[str]:
        return self._tokens[self._position :]

    def __len__(self) -> int:
        return len(self._tokens) - self._position

    def __bool__(self) -> bool:
        return not self.empty

    def __repr__(self) -> str:
        return f"TokenStream(position={self._position}, remaining={self.remaining()!r})"
