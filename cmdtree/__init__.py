"""
cmdtree: declarative command tree parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .binding import AttributeBinding, Binding, CallbackBinding, ItemBinding, bind
from .command import Command, Positionals, Subcommands
from .exceptions import (
    AmbiguousOptionError,
    BindingError,
    CmdTreeError,
    CommandDefinitionError,
    InvalidValueError,
    InvalidValueTypeError,
    MissingSubcommandError,
    MissingValueError,
    ParseError,
    UnknownOptionError,
)
from .logger import logger
from .matcher import OptionMatch, match_option
from .parameter import Parameter, ParameterKind
from .parser import CommandTreeParser, ParseResult, parse
from .usage import render_help, usage
from .value_type import ValueType

__all__ = [
    "AmbiguousOptionError",
    "AttributeBinding",
    "Binding",
    "BindingError",
    "CallbackBinding",
    "CmdTreeError",
    "Command",
    "CommandDefinitionError",
    "CommandTreeParser",
    "InvalidValueError",
    "InvalidValueTypeError",
    "ItemBinding",
    "MissingSubcommandError",
    "MissingValueError",
    "OptionMatch",
    "Parameter",
    "ParameterKind",
    "ParseError",
    "ParseResult",
    "Positionals",
    "Subcommands",
    "UnknownOptionError",
    "ValueType",
    "bind",
    "logger",
    "match_option",
    "parse",
    "render_help",
    "usage",
]
