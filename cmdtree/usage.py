# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage and help rendering for a command path.

The parser never formats text itself. These helpers read the tree through its
public accessors:
- `usage()`: a plain-text block (`USAGE:` line plus `OPTIONS:`, `PARAMETERS:`
  and `SUBCOMMANDS:` sections), suitable for logs or non-terminal output.
- `render_help()`: the same content printed through a Rich console.
- `render_usage_line()`: only the `USAGE:` line, used under parse errors.
"""
from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmdtree.command import Command
from cmdtree.console import Styles
from cmdtree.parameter import Parameter

PARAMETERS_HEADING = "PARAMETERS: <required> [optional]"


def _as_path(path: Command | Sequence[Command]) -> list[Command]:
    if isinstance(path, Command):
        return [path]
    path = list(path)
    if not path:
        raise ValueError("usage() needs at least one command")
    return path


def usage_line(path: Command | Sequence[Command]) -> str:
    """Return `USAGE: prog cmd [options] <command> <params...>`."""
    path = _as_path(path)
    node = path[-1]
    line = "USAGE: " + " ".join(command.token for command in path)
    if node.options:
        line += " [options]"
    if node.subcommands:
        line += " <command>"
    parameters = list(node.positionals)
    if parameters:
        line += " " + " ".join(parameter.usage_token for parameter in parameters)
    return line


def _section(heading: str, rows: list[tuple[str, str, str]]) -> str:
    width = max(len(token) for token, _, _ in rows)
    lines = [f"\n\n{heading}"]
    for token, label, description in rows:
        lines.append(f"\n  {label}{' ' * (width - len(token))} : {description}")
    return "".join(lines)


def _parameter_rows(parameters: list[Parameter]) -> list[tuple[str, str, str]]:
    return [
        (parameter.token, parameter.usage_token, parameter.description)
        for parameter in parameters
    ]


def usage(path: Command | Sequence[Command]) -> str:
    """
    Build the plain-text usage for the last command of `path`.

    Entries in a section are padded to the longest token in that section.

    Args:
        path (Command | Sequence[Command]): A command or a root-to-node path.

    Returns:
        str: The usage text, without a trailing newline.
    """
    path = _as_path(path)
    node = path[-1]
    text = usage_line(path)

    options = node.options
    parameters = list(node.positionals)
    commands = node.subcommands

    if options:
        text += _section("OPTIONS:", _parameter_rows(options))
    if parameters:
        text += _section(PARAMETERS_HEADING, _parameter_rows(parameters))
    if commands:
        text += _section(
            "SUBCOMMANDS:",
            [(child.token, child.token, child.description) for child in commands],
        )
    return text


def render_usage_line(
    path: Command | Sequence[Command], console: Console | None = None
) -> None:
    from cmdtree.console import console as default_console

    console = console or default_console
    console.print(escape(usage_line(path)), style=Styles.USAGE)


def render_help(
    path: Command | Sequence[Command], console: Console | None = None
) -> None:
    """Print the help for the last command of `path` using Rich."""
    from cmdtree.console import console as default_console

    console = console or default_console
    path = _as_path(path)
    node = path[-1]

    render_usage_line(path, console)
    if node.description:
        console.print(f"\n{escape(node.description)}")

    sections: list[tuple[str, list[tuple[str, str]], str]] = []
    if node.options:
        sections.append(
            (
                "OPTIONS:",
                [(option.usage_token, option.description) for option in node.options],
                Styles.TOKEN,
            )
        )
    parameters = list(node.positionals)
    if parameters:
        sections.append(
            (
                PARAMETERS_HEADING,
                [(p.usage_token, p.description) for p in parameters],
                Styles.TOKEN,
            )
        )
    if node.subcommands:
        sections.append(
            (
                "SUBCOMMANDS:",
                [(command.token, command.description) for command in node.subcommands],
                Styles.COMMAND,
            )
        )

    for heading, rows, style in sections:
        console.print(f"\n{escape(heading)}", style=Styles.HEADING)
        table = Table.grid(padding=(0, 2))
        table.add_column(style=style, no_wrap=True)
        table.add_column()
        for label, description in rows:
            table.add_row(escape(f"  {label}"), escape(description))
        console.print(table)
