# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Command`, a node of the declarative command tree.

Each node owns its tagged options and exactly one kind of children: either
positional parameters (`Positionals`) or child commands (`Subcommands`). Mixing
the two is rejected while the tree is built, so the parser never has to check.

A node's bind target is the object its parameters write into. A child that does
not declare its own target inherits the parent's when it is attached, and the
inheritance is pushed down to its own descendants.

Command identities:
Every matched child contributes an identity to `ParseResult.commands`. By default
the identity is the token string; declaring a node with an `Enum` member as its
token makes the identity that member, which is convenient for `match` statements.

Example:
    class Verb(Enum):
        ADD = "add"
        REMOVE = "remove"

    root = (
        Command.root("tool", bind_target=options)
        .tagged("verbose", type=ValueType.toggle(), binding="verbose")
        .command(Verb.ADD, configure=lambda add: add.required("name", binding="name"))
        .command(Verb.REMOVE)
    )
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator

from cmdtree.exceptions import CommandDefinitionError
from cmdtree.parameter import Parameter, ParameterKind
from cmdtree.utils import get_program_invocation
from cmdtree.value_type import STRING, ValueType


@dataclass
class Positionals:
    """Untagged parameters of a leaf command, consumed in declaration order."""

    required: list[Parameter] = field(default_factory=list)
    optional: list[Parameter] = field(default_factory=list)

    def __iter__(self) -> Iterator[Parameter]:
        yield from self.required
        yield from self.optional


@dataclass
class Subcommands:
    """Child commands of an inner node, matched in declaration order."""

    commands: list[Command] = field(default_factory=list)

    def __iter__(self) -> Iterator[Command]:
        yield from self.commands


def _identity_for(token: str | Enum) -> Callable[[str], Any]:
    if isinstance(token, Enum):
        return type(token)
    return str


class Command:
    """
    A node in the command tree.

    Attributes:
        token (str): String matched to select this node; the program name at the root.
        description (str): Help text.
        bind_target (Any): Object receiving this node's parameter values.
        identity (Callable[[str], Any]): Turns the matched token into the value
            appended to `ParseResult.commands`.
    """

    def __init__(
        self,
        token: str | Enum,
        description: str = "",
        bind_target: Any = None,
        identity: Callable[[str], Any] | None = None,
    ) -> None:
        if isinstance(token, Enum):
            if not isinstance(token.value, str):
                raise CommandDefinitionError(
                    f"Enum command tokens need string values, got {token.value!r}"
                )
            text = token.value
        else:
            text = token
        if not isinstance(text, str) or not text:
            raise CommandDefinitionError("Command token must be a non-empty string")
        if text.startswith("-"):
            raise CommandDefinitionError(
                f"Command token '{text}' cannot start with '-'"
            )
        self.token: str = text
        self.description: str = description
        self.bind_target: Any = bind_target
        self.identity: Callable[[str], Any] = identity or _identity_for(token)
        self._owns_bind_target: bool = bind_target is not None
        self._options: list[Parameter] = []
        self._children: Positionals | Subcommands | None = None

    @classmethod
    def root(
        cls,
        program: str | None = None,
        description: str = "",
        bind_target: Any = None,
    ) -> Command:
        """Create the root node; `program` defaults to the running program's name."""
        return cls(program or get_program_invocation(), description, bind_target)

    @property
    def options(self) -> list[Parameter]:
        return list(self._options)

    @property
    def positionals(self) -> Positionals:
        if isinstance(self._children, Positionals):
            return self._children
        return Positionals()

    @property
    def required_parameters(self) -> list[Parameter]:
        return list(self.positionals.required)

    @property
    def optional_parameters(self) -> list[Parameter]:
        return list(self.positionals.optional)

    @property
    def subcommands(self) -> list[Command]:
        if isinstance(self._children, Subcommands):
            return list(self._children.commands)
        return []

    @property
    def has_subcommands(self) -> bool:
        return isinstance(self._children, Subcommands) and bool(self._children.commands)

    def find_subcommand(self, token: str) -> Command | None:
        """Return the first declared child whose token equals `token`."""
        for child in self.subcommands:
            if child.token == token:
                return child
        return None

    def find_option(self, token: str) -> Parameter | None:
        for option in self._options:
            if option.token == token:
                return option
        return None

    def materialize(self, token: str) -> Any:
        return self.identity(token)

    def add_parameter(self, parameter: Parameter) -> Command:
        """Attach an already built parameter, enforcing the node invariants."""
        if parameter.kind is ParameterKind.TAGGED:
            if self.find_option(parameter.token) is not None:
                raise CommandDefinitionError(
                    f"Duplicate option '-{parameter.token}' on command '{self.token}'"
                )
            self._options.append(parameter)
            return self

        if isinstance(self._children, Subcommands):
            raise CommandDefinitionError(
                f"Command '{self.token}' has subcommands and cannot take "
                f"untagged parameter '{parameter.token}'"
            )
        if self._children is None:
            self._children = Positionals()
        if parameter.kind is ParameterKind.REQUIRED:
            self._children.required.append(parameter)
        else:
            self._children.optional.append(parameter)
        return self

    def tagged(
        self,
        token: str,
        type: ValueType = STRING,  # noqa: A002
        binding: Any = None,
        description: str = "",
        target_type: type | None = None,
    ) -> Command:
        return self.add_parameter(
            Parameter.create(
                token, ParameterKind.TAGGED, binding, type, description, target_type
            )
        )

    def required(
        self,
        token: str,
        type: ValueType = STRING,  # noqa: A002
        binding: Any = None,
        description: str = "",
        target_type: type | None = None,
    ) -> Command:
        return self.add_parameter(
            Parameter.create(
                token, ParameterKind.REQUIRED, binding, type, description, target_type
            )
        )

    def optional(
        self,
        token: str,
        type: ValueType = STRING,  # noqa: A002
        binding: Any = None,
        description: str = "",
        target_type: type | None = None,
    ) -> Command:
        return self.add_parameter(
            Parameter.create(
                token, ParameterKind.OPTIONAL, binding, type, description, target_type
            )
        )

    def add_command(self, command: Command) -> Command:
        """Attach a pre-built child node."""
        if not isinstance(command, Command):
            raise CommandDefinitionError(f"Expected a Command, got {command!r}")
        if isinstance(self._children, Positionals):
            raise CommandDefinitionError(
                f"Command '{self.token}' has untagged parameters and cannot take "
                f"subcommand '{command.token}'"
            )
        if self._children is None:
            self._children = Subcommands()
        command._inherit_bind_target(self.bind_target)
        self._children.commands.append(command)
        return self

    def command(
        self,
        token: str | Enum,
        bind_target: Any = None,
        description: str = "",
        configure: Callable[[Command], Any] | None = None,
        identity: Callable[[str], Any] | None = None,
    ) -> Command:
        """Declare a child command, optionally configuring it in place."""
        child = Command(token, description, bind_target, identity)
        self.add_command(child)
        if configure is not None:
            configure(child)
        return self

    def _inherit_bind_target(self, bind_target: Any) -> None:
        if self._owns_bind_target:
            return
        self.bind_target = bind_target
        for child in self.subcommands:
            child._inherit_bind_target(bind_target)

    def walk(self) -> Iterator[tuple[Command, ...]]:
        """Yield every root-to-node path in depth-first declaration order."""
        stack: list[tuple[Command, ...]] = [(self,)]
        while stack:
            path = stack.pop()
            yield path
            stack.extend((*path, child) for child in reversed(path[-1].subcommands))

    def __str__(self) -> str:
        return (
            f"Command(token={self.token!r}, options={len(self._options)}, "
            f"required={len(self.required_parameters)}, "
            f"optional={len(self.optional_parameters)}, "
            f"subcommands={len(self.subcommands)})"
        )

    def __repr__(self) -> str:
        return str(self)
