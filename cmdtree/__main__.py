"""
cmdtree command line

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Usage:
    python -m cmdtree DEFINITION [ARGS...]
    python -m cmdtree DEFINITION --help [COMMAND...]

Loads a command tree from a YAML or TOML definition, parses ARGS against it and
prints the matched commands, the remainder and the bound values.
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from rich.pretty import Pretty

from cmdtree.command import Command
from cmdtree.config import load_config
from cmdtree.console import console
from cmdtree.exceptions import ParseError
from cmdtree.parser import parse
from cmdtree.usage import render_help
from cmdtree.utils import setup_logging

HELP_FLAGS = ("-h", "--help")


def help_path(root: Command, tokens: Sequence[str]) -> list[Command]:
    """Return the deepest declared path whose tokens lead `tokens`."""
    wanted = [root.token, *tokens]
    best: tuple[Command, ...] = (root,)
    for path in root.walk():
        if len(path) > len(best) and [c.token for c in path] == wanted[: len(path)]:
            best = path
    return list(best)


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in HELP_FLAGS:
        console.print("usage: cmdtree DEFINITION [ARGS...]")
        return 0 if argv else 2

    setup_logging(log_filename=None, console_log_level=logging.WARNING)
    definition, arguments = argv[0], argv[1:]
    config = load_config(definition)
    namespace: dict = {}
    root = config.to_command(namespace)

    if arguments and arguments[0] in HELP_FLAGS:
        render_help(help_path(root, arguments[1:]), console)
        return 0

    try:
        result = parse(arguments, root, config.option_negation)
    except ParseError as error:
        error.render(console)
        return 2

    console.print(
        Pretty(
            {
                "commands": result.commands,
                "remainder": result.remainder,
                "values": namespace,
            }
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
