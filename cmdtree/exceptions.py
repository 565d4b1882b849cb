# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cmdtree.

Two families live here. Definition errors signal a malformed command tree or a
binding that disagrees with its bind target; they are programming errors and are
never caught by the parser. Parse errors signal bad input; every one of them
carries the command path accumulated up to the failure point (root first) so a
renderer can show the usage of the node that failed.

Exception Hierarchy:
- CmdTreeError
    ├── CommandDefinitionError
    ├── BindingError
    └── ParseError
          ├── UnknownOptionError
          ├── AmbiguousOptionError
          ├── MissingValueError
          ├── InvalidValueError
          ├── InvalidValueTypeError
          └── MissingSubcommandError

Parse errors are terminal for the current parse call. Bindings applied before
the failing token stay applied.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from cmdtree.command import Command
    from cmdtree.parameter import Parameter


class CmdTreeError(Exception):
    """Base exception for cmdtree."""


class CommandDefinitionError(CmdTreeError):
    """Raised when a command tree or parameter is declared inconsistently."""


class BindingError(CmdTreeError):
    """Raised when a binding cannot be applied to its bind target."""


class ParseError(CmdTreeError):
    """
    Base class for errors caused by the argument list.

    Attributes:
        path (list[Command]): Commands matched so far, root first.
    """

    def __init__(self, message: str, path: Sequence[Command]) -> None:
        super().__init__(message)
        self.message = message
        self.path: list[Command] = list(path)

    @property
    def path_tokens(self) -> list[str]:
        return [command.token for command in self.path]

    def render(self, console: Console | None = None) -> None:
        """Print the error followed by the usage of the failing command."""
        from cmdtree.console import Styles
        from cmdtree.console import console as default_console
        from cmdtree.usage import render_usage_line

        console = console or default_console
        console.print(f"[{Styles.ERROR}]error:[/] {escape(self.message)}")
        if self.path:
            render_usage_line(self.path, console)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, path={self.path_tokens!r})"


class UnknownOptionError(ParseError):
    """Raised when a dash-prefixed token matches no declared option."""

    def __init__(self, token: str, path: Sequence[Command]) -> None:
        super().__init__(f"Unknown option: {token}", path)
        self.token = token


class AmbiguousOptionError(ParseError):
    """Raised when a dash-prefixed token matches more than one declared option."""

    def __init__(
        self, token: str, candidates: Sequence[Parameter], path: Sequence[Command]
    ) -> None:
        names = ", ".join(candidate.usage_token for candidate in candidates)
        super().__init__(f"Ambiguous option: {token} could match {names}", path)
        self.token = token
        self.candidates: list[Parameter] = list(candidates)


class MissingValueError(ParseError):
    """Raised when a tagged option or required parameter has no value token."""

    def __init__(self, parameter: Parameter, path: Sequence[Command]) -> None:
        super().__init__(f"Missing value for {parameter.usage_token}", path)
        self.parameter = parameter


class InvalidValueError(ParseError):
    """Raised when a value has the right shape but fails a declared constraint."""

    def __init__(self, parameter: Parameter, raw: str, path: Sequence[Command]) -> None:
        super().__init__(f"Invalid value for {parameter.usage_token}: '{raw}'", path)
        self.parameter = parameter
        self.raw = raw


class InvalidValueTypeError(ParseError):
    """Raised when a value cannot be converted to the declared type."""

    def __init__(self, parameter: Parameter, raw: str, path: Sequence[Command]) -> None:
        super().__init__(
            f"Invalid {parameter.type.name} value for {parameter.usage_token}: '{raw}'",
            path,
        )
        self.parameter = parameter
        self.raw = raw


class MissingSubcommandError(ParseError):
    """Raised when a command declares subcommands but none was given."""

    def __init__(self, path: Sequence[Command]) -> None:
        token = path[-1].token if path else ""
        super().__init__(f"Missing subcommand for '{token}'", path)
