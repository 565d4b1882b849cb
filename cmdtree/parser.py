# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the recursive descent engine that walks a `Command` tree
over an argument list, binding values as it goes.

Algorithm, per command node:
- Option phase: while the front token is a dash-prefixed token, resolve it with
  `match_option()` and consume it. Toggles bind `True`, or `False` when matched
  through the negation prefix; other options consume the next token as their
  value.
- Subcommand dispatch: a non-option front token at a node with subcommands is
  compared against the children in declaration order. The first child with an
  equal token is consumed, its identity is recorded and the engine recurses into
  it. Only one child is dispatched per node; afterwards the option phase resumes
  and the next non-option token ends the loop.
- Positional phase: required parameters then optional ones, each taking one
  token. A required parameter with no token left is an error; an optional one
  stops the phase.
- Terminal check: a node with subcommands that dispatched none is an error.

Tokens left over after the root returns, followed by everything after `--`, are
returned as the remainder.

Example:
    settings = Settings()
    root = (
        Command.root("tool", bind_target=settings)
        .tagged("count", type=ValueType.int((1, 10)), binding="count")
        .required("path", binding="path")
    )
    result = parse(["-count=3", "notes.txt"], root)
    # settings.count == 3, settings.path == "notes.txt", result.commands == []
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from cmdtree.coercion import coerce
from cmdtree.command import Command
from cmdtree.exceptions import MissingSubcommandError, MissingValueError
from cmdtree.logger import logger
from cmdtree.matcher import DEFAULT_NEGATION, match_option
from cmdtree.parameter import Parameter, ParameterKind
from cmdtree.tokenizer import TokenStream, prepare


@dataclass
class ParseResult:
    """Matched command identities (root excluded) and unconsumed arguments."""

    commands: list[Any] = field(default_factory=list)
    remainder: list[str] = field(default_factory=list)


class CommandTreeParser:
    """
    Parses argument lists against a command tree.

    A parser holds no per-call state between `parse()` calls; each call gets its
    own token stream, command path and result lists. A single call is not
    thread-safe and must not share a tree with a concurrent call that binds into
    the same targets.
    """

    def __init__(self, root: Command, option_negation: str = DEFAULT_NEGATION) -> None:
        if not isinstance(root, Command):
            raise TypeError(f"root must be a Command, got {type(root).__name__}")
        self.root: Command = root
        self.option_negation: str = option_negation

    def parse(self, arguments: Iterable[str]) -> ParseResult:
        """
        Parse `arguments` and bind values into the tree's bind targets.

        Raises:
            ParseError: The first input error met; bindings made before it remain.
        """
        stream, remainder = prepare(arguments)
        run = _ParseRun(stream, self.option_negation)
        logger.debug("Parsing %d token(s) against '%s'", len(stream), self.root.token)
        run.descend(self.root)
        return ParseResult(
            commands=run.commands, remainder=stream.remaining() + remainder
        )


class _ParseRun:
    """Mutable state of one parse call."""

    def __init__(self, stream: TokenStream, option_negation: str) -> None:
        self.stream = stream
        self.option_negation = option_negation
        self.path: list[Command] = []
        self.commands: list[Any] = []

    def descend(self, node: Command) -> None:
        self.path.append(node)
        dispatched = False

        while self.stream:
            token = self.stream.peek()
            match = match_option(token, node.options, self.option_negation, self.path)
            if match is not None:
                self.stream.pop()
                if match.parameter.type.is_toggle:
                    self.assign(node, match.parameter, match.toggle_value)
                else:
                    self.consume_value(node, match.parameter)
                continue

            if dispatched or not node.has_subcommands:
                break
            child = node.find_subcommand(token)
            if child is None:
                logger.debug("No subcommand of '%s' matches '%s'", node.token, token)
                break
            self.stream.pop()
            self.commands.append(child.materialize(token))
            dispatched = True
            logger.debug("Dispatching '%s' -> '%s'", node.token, child.token)
            self.descend(child)

        for parameter in node.positionals:
            if not self.stream:
                if parameter.kind is ParameterKind.REQUIRED:
                    raise MissingValueError(parameter, self.path)
                break
            self.consume_value(node, parameter)

        if node.has_subcommands and not dispatched:
            raise MissingSubcommandError(self.path)

    def consume_value(self, node: Command, parameter: Parameter) -> None:
        if not self.stream:
            raise MissingValueError(parameter, self.path)
        raw = self.stream.pop()
        self.assign(node, parameter, coerce(raw, parameter.type, parameter, self.path))

    def assign(self, node: Command, parameter: Parameter, value: Any) -> None:
        parameter.assign(node.bind_target, value)


def parse(
    arguments: Iterable[str],
    root: Command,
    option_negation: str = DEFAULT_NEGATION,
) -> ParseResult:
    """Parse `arguments` against `root`; see `CommandTreeParser.parse`."""
    return CommandTreeParser(root, option_negation).parse(arguments)
