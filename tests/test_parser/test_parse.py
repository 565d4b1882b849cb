from dataclasses import dataclass, field
from enum import Enum

import pytest

from cmdtree import (
    AmbiguousOptionError,
    Command,
    CommandTreeParser,
    InvalidValueError,
    InvalidValueTypeError,
    MissingSubcommandError,
    MissingValueError,
    UnknownOptionError,
    ValueType,
    parse,
)


class Verb(Enum):
    REMOTE = "remote"
    ADD = "add"
    SHOW = "show"


@dataclass
class Settings:
    toggle: bool | None = None
    number: int | None = None
    numbers: list[int] = field(default_factory=list)
    name: str | None = None
    url: str | None = None
    first: str | None = None
    second: str | None = None
    third: str | None = None


def flat_root(settings: Settings) -> Command:
    return (
        Command.root("prog", bind_target=settings)
        .tagged("toggle", type=ValueType.toggle(), binding="toggle")
        .tagged("int", type=ValueType.int(), binding="number")
        .tagged("array", type=ValueType.array(ValueType.int()), binding="numbers")
    )


def tree_root(settings: Settings) -> Command:
    def configure_remote(remote: Command) -> None:
        remote.command(
            Verb.ADD,
            configure=lambda add: add.required("name", binding="name").required(
                "url", binding="url"
            ),
        )
        remote.command(Verb.SHOW)

    return (
        Command.root("prog", bind_target=settings)
        .tagged("toggle", type=ValueType.toggle(), binding="toggle")
        .command(Verb.REMOTE, configure=configure_remote)
    )


@pytest.mark.parametrize(
    "arguments", [["-int=1"], ["-int", "1"], ["--int=1"], ["--int", "1"]]
)
def test_inline_and_separate_values_bind_identically(arguments):
    settings = Settings()
    result = parse(arguments, flat_root(settings))
    assert settings.number == 1
    assert result.commands == []
    assert result.remainder == []


def test_array_round_trip():
    settings = Settings()
    parse(["-array=3,4,5"], flat_root(settings))
    assert settings.numbers == [3, 4, 5]


def test_toggle_and_negated_toggle():
    settings = Settings()
    parse(["-toggle"], flat_root(settings))
    assert settings.toggle is True

    parse(["-notoggle"], flat_root(settings))
    assert settings.toggle is False


def test_toggle_takes_no_value_token():
    settings = Settings()
    result = parse(["-toggle", "-int", "2"], flat_root(settings))
    assert settings.toggle is True
    assert settings.number == 2
    assert result.remainder == []


def test_option_value_may_start_with_a_dash():
    settings = Settings()
    parse(["-int", "-5"], flat_root(settings))
    assert settings.number == -5


def test_missing_option_value():
    settings = Settings()
    root = flat_root(settings)
    with pytest.raises(MissingValueError) as excinfo:
        parse(["-int"], root)
    assert excinfo.value.parameter.token == "int"
    assert excinfo.value.path == [root]


def test_unknown_and_ambiguous_options():
    settings = Settings()
    root = flat_root(settings).tagged("integer", binding="name")
    with pytest.raises(UnknownOptionError):
        parse(["-bogus"], root)
    with pytest.raises(AmbiguousOptionError) as excinfo:
        parse(["-in", "1"], root)
    assert [candidate.token for candidate in excinfo.value.candidates] == [
        "int",
        "integer",
    ]


def test_bindings_applied_before_an_error_remain():
    settings = Settings()
    with pytest.raises(UnknownOptionError):
        parse(["-int=5", "-bogus"], flat_root(settings))
    assert settings.number == 5


def test_leftover_tokens_become_remainder():
    settings = Settings()
    result = parse(
        ["-int", "1", "extra", "-toggle", "--", "after"], flat_root(settings)
    )
    assert result.remainder == ["extra", "-toggle", "after"]
    assert settings.toggle is None


def test_subcommand_with_terminator_remainder():
    root = Command.root("prog").command("cmd")
    result = parse(["cmd", "--", "a", "b"], root)
    assert result.commands == ["cmd"]
    assert result.remainder == ["a", "b"]


def test_nested_subcommands_and_enum_identities():
    settings = Settings()
    result = parse(
        ["--toggle", "remote", "add", "origin", "https://example.com/repo.git"],
        tree_root(settings),
    )
    assert result.commands == [Verb.REMOTE, Verb.ADD]
    assert settings.toggle is True
    assert settings.name == "origin"
    assert settings.url == "https://example.com/repo.git"


def test_required_positional_missing_reports_parameter_and_path():
    settings = Settings()
    root = tree_root(settings)
    with pytest.raises(MissingValueError) as excinfo:
        parse(["remote", "add", "origin"], root)
    error = excinfo.value
    assert error.parameter.token == "url"
    assert error.path_tokens == ["prog", "remote", "add"]
    assert settings.name == "origin"


def test_missing_subcommand():
    root = tree_root(Settings())
    with pytest.raises(MissingSubcommandError) as excinfo:
        parse(["-toggle"], root)
    assert excinfo.value.path == [root]

    with pytest.raises(MissingSubcommandError) as excinfo:
        parse(["remote"], root)
    assert excinfo.value.path_tokens == ["prog", "remote"]


def test_unmatched_subcommand_token_is_missing_subcommand():
    with pytest.raises(MissingSubcommandError):
        parse(["bogus"], tree_root(Settings()))


def test_subcommand_options_belong_to_the_subcommand():
    settings = Settings()
    root = tree_root(settings)
    with pytest.raises(UnknownOptionError) as excinfo:
        parse(["remote", "-toggle", "show"], root)
    assert excinfo.value.path_tokens == ["prog", "remote"]


def test_parent_options_resume_after_subcommand():
    settings = Settings()
    root = (
        Command.root("prog", bind_target=settings)
        .tagged("toggle", type=ValueType.toggle(), binding="toggle")
        .command("run", configure=lambda run: run.required("target", binding="name"))
    )
    result = parse(["run", "app", "-toggle"], root)
    assert settings.name == "app"
    assert settings.toggle is True
    assert result.remainder == []

    result = parse(["run", "app", "extra"], root)
    assert result.commands == ["run"]
    assert result.remainder == ["extra"]


def test_only_one_subcommand_is_dispatched_per_node():
    root = Command.root("prog").command("a").command("b")
    result = parse(["a", "b"], root)
    assert result.commands == ["a"]
    assert result.remainder == ["b"]


def test_first_declared_subcommand_wins():
    root = (
        Command.root("prog")
        .command("dup", identity=lambda token: ("first", token))
        .command("dup", identity=lambda token: ("second", token))
    )
    assert parse(["dup"], root).commands == [("first", "dup")]


def test_optional_positionals_stop_quietly():
    settings = Settings()
    root = (
        Command.root("prog", bind_target=settings)
        .required("first", binding="first")
        .optional("second", binding="second")
        .optional("third", binding="third")
    )
    parse(["x"], root)
    assert (settings.first, settings.second, settings.third) == ("x", None, None)

    result = parse(["x", "y", "z", "w"], root)
    assert (settings.first, settings.second, settings.third) == ("x", "y", "z")
    assert result.remainder == ["w"]


def test_options_are_drained_before_positionals():
    settings = Settings()
    root = flat_root(settings).required("first", binding="first")
    parse(["-int", "3", "-toggle", "value"], root)
    assert settings.number == 3
    assert settings.toggle is True
    assert settings.first == "value"


def test_dash_token_where_a_positional_is_expected():
    root = Command.root("prog", bind_target=Settings()).required(
        "first", binding="first"
    )
    with pytest.raises(UnknownOptionError):
        parse(["-x"], root)


def test_positional_value_errors():
    settings = Settings()
    root = (
        Command.root("prog", bind_target=settings)
        .required("count", type=ValueType.int((1, 3)), binding="number")
    )
    with pytest.raises(InvalidValueTypeError) as excinfo:
        parse(["two"], root)
    assert excinfo.value.raw == "two"
    assert excinfo.value.parameter.token == "count"

    with pytest.raises(InvalidValueError):
        parse(["4"], root)


def test_custom_negation_prefix():
    settings = Settings()
    root = flat_root(settings)
    parse(["-dont-toggle"], root, option_negation="dont-")
    assert settings.toggle is False


def test_subcommand_with_own_bind_target():
    parent, child = Settings(), Settings()
    root = Command.root("prog", bind_target=parent).command(
        "sub",
        bind_target=child,
        configure=lambda sub: sub.required("first", binding="first"),
    )
    parse(["sub", "value"], root)
    assert child.first == "value"
    assert parent.first is None


def test_parser_can_be_reused():
    settings = Settings()
    parser = CommandTreeParser(tree_root(settings))
    first = parser.parse(["remote", "show"])
    second = parser.parse(["remote", "add", "a", "b"])
    assert first.commands == [Verb.REMOTE, Verb.SHOW]
    assert second.commands == [Verb.REMOTE, Verb.ADD]


def test_parser_requires_a_command_root():
    with pytest.raises(TypeError):
        CommandTreeParser("prog")
