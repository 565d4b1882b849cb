# Cmdtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Builds command trees from YAML or TOML definitions.

A definition describes the root command and, recursively, its options,
positional parameters and subcommands:

    program: backup
    description: Back up and restore directories
    option_negation: "no"
    options:
      - token: verbose
        type: toggle
    commands:
      - token: restore
        options:
          - token: since
            type: date
            format: "%Y-%m-%d"
        required:
          - token: archive
      - token: run
        optional:
          - token: paths
            type: array
            element: string

Every parameter binds into one shared dict under its `dest` (the token with
dashes replaced by underscores when omitted). Custom conversions are given as
dotted import paths.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable, Literal

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from cmdtree.binding import ItemBinding
from cmdtree.command import Command
from cmdtree.exceptions import CommandDefinitionError
from cmdtree.logger import logger
from cmdtree.matcher import DEFAULT_NEGATION
from cmdtree.parameter import Parameter, ParameterKind
from cmdtree.value_type import ValueType

MAX_DEPTH = 8

TypeName = Literal[
    "string", "int", "double", "bool", "date", "array", "toggle", "custom"
]


def import_object(dotted_path: str) -> Any:
    """Dynamically imports an object from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise CommandDefinitionError(f"Invalid import path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise CommandDefinitionError(
            f"Could not import '{dotted_path}': {error}"
        ) from error
    try:
        return getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise CommandDefinitionError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error


class RawParameter(BaseModel):
    """Raw parameter model for cmdtree configuration."""

    token: str
    type: TypeName = "string"
    description: str = ""
    dest: str | None = None
    range: tuple[int, int] | None = None
    format: str | None = None
    element: TypeName | None = None
    convert: str | None = None

    @model_validator(mode="after")
    def validate_type_options(self) -> RawParameter:
        value_type = self.element if self.type == "array" else self.type
        if self.type == "array" and self.element is None:
            raise ValueError(f"Array parameter '{self.token}' needs an element type.")
        if self.type != "array" and self.element is not None:
            raise ValueError(
                f"Only array parameters take an element type ('{self.token}')."
            )
        if self.element in ("array", "toggle"):
            raise ValueError(
                f"Array parameter '{self.token}' cannot hold {self.element} elements."
            )
        if self.range is not None and value_type != "int":
            raise ValueError(f"Only int parameters take a range ('{self.token}').")
        if self.format is not None and value_type != "date":
            raise ValueError(f"Only date parameters take a format ('{self.token}').")
        if (value_type == "custom") != (self.convert is not None):
            raise ValueError(
                f"Custom parameters, and only those, need a convert path "
                f"('{self.token}')."
            )
        return self

    @property
    def key(self) -> str:
        return self.dest or self.token.replace("-", "_")

    def _scalar_type(self, name: str) -> ValueType:
        if name == "int":
            return ValueType.int(self.range)
        if name == "date":
            return ValueType.date(self.format)
        if name == "custom":
            assert self.convert is not None, "convert should not be None"
            convert: Callable[[str], Any] = import_object(self.convert)
            return ValueType.custom(convert, name=self.convert.rpartition(".")[2])
        factories: dict[str, Callable[[], ValueType]] = {
            "string": ValueType.string,
            "double": ValueType.double,
            "bool": ValueType.bool,
            "toggle": ValueType.toggle,
        }
        return factories[name]()

    def to_value_type(self) -> ValueType:
        if self.type == "array":
            assert self.element is not None, "element should not be None"
            return ValueType.array(self._scalar_type(self.element))
        return self._scalar_type(self.type)

    def to_parameter(self, kind: ParameterKind) -> Parameter:
        return Parameter(
            token=self.token,
            kind=kind,
            type=self.to_value_type(),
            binding=ItemBinding(self.key),
            description=self.description,
        )


class RawCommand(BaseModel):
    """Raw command model for cmdtree configuration."""

    token: str
    description: str = ""
    options: list[RawParameter] = Field(default_factory=list)
    required: list[RawParameter] = Field(default_factory=list)
    optional: list[RawParameter] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_children(self) -> RawCommand:
        if (self.required or self.optional) and self.commands:
            raise ValueError(
                f"Command '{self.token}' must define either untagged parameters "
                "or commands, but not both."
            )
        return self

    def depth(self) -> int:
        return 1 + max((command.depth() for command in self.commands), default=0)

    def populate(self, node: Command) -> Command:
        for raw in self.options:
            node.add_parameter(raw.to_parameter(ParameterKind.TAGGED))
        for raw in self.required:
            node.add_parameter(raw.to_parameter(ParameterKind.REQUIRED))
        for raw in self.optional:
            node.add_parameter(raw.to_parameter(ParameterKind.OPTIONAL))
        for raw_command in self.commands:
            child = Command(raw_command.token, raw_command.description)
            node.add_command(child)
            raw_command.populate(child)
        return node


class CmdTreeConfig(BaseModel):
    """cmdtree configuration model."""

    program: str | None = None
    description: str = ""
    option_negation: str = DEFAULT_NEGATION
    options: list[RawParameter] = Field(default_factory=list)
    required: list[RawParameter] = Field(default_factory=list)
    optional: list[RawParameter] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    @field_validator("option_negation")
    @classmethod
    def validate_option_negation(cls, value: str) -> str:
        if value.startswith("-"):
            raise ValueError("option_negation must not start with '-'")
        return value

    def as_raw_command(self) -> RawCommand:
        return RawCommand(
            token=self.program or "program",
            description=self.description,
            options=self.options,
            required=self.required,
            optional=self.optional,
            commands=self.commands,
        )

    def to_command(self, namespace: dict[str, Any] | None = None) -> Command:
        """Build the tree; every parameter binds into `namespace`."""
        raw = self.as_raw_command()
        if raw.depth() > MAX_DEPTH:
            raise CommandDefinitionError(
                f"Maximum command depth exceeded ({MAX_DEPTH} levels deep)"
            )
        root = Command.root(
            self.program,
            self.description,
            bind_target=namespace if namespace is not None else {},
        )
        return raw.populate(root)


def load_config(file_path: Path | str) -> CmdTreeConfig:
    """
    Read and validate a YAML or TOML command tree definition.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is not a mapping.
        pydantic.ValidationError: If the definition is malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping describing the root command.\n"
            "Example:\n"
            "program: 'tool'\n"
            "commands:\n"
            "  - token: 'add'\n"
            "    required:\n"
            "      - token: 'name'"
        )

    logger.debug("Loaded command tree definition from %s", path)
    return CmdTreeConfig.model_validate(raw_config)


def loader(file_path: Path | str, namespace: dict[str, Any] | None = None) -> Command:
    """Load a command tree; parsed values land in `root.bind_target`."""
    return load_config(file_path).to_command(namespace)
