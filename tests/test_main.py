import pytest

import cmdtree.__main__ as cli
from cmdtree import Command
from cmdtree.__main__ import help_path, main

TREE = """
program: notes
commands:
  - token: add
    description: Add a note
    required:
      - token: text
  - token: list
"""


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the entry point from replacing pytest's log handlers."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


@pytest.fixture
def tree(tmp_path):
    path = tmp_path / "notes.yaml"
    path.write_text(TREE)
    return str(path)


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 2
    assert "usage: cmdtree" in capsys.readouterr().err


def test_help_flag_prints_usage(capsys):
    assert main(["--help"]) == 0
    assert "usage: cmdtree" in capsys.readouterr().err


def test_successful_parse(tree, capsys):
    assert main([tree, "add", "hello"]) == 0
    output = capsys.readouterr().err
    assert "'add'" in output
    assert "'hello'" in output


def test_parse_error_exit_code(tree, capsys):
    assert main([tree, "add"]) == 2
    output = capsys.readouterr().err
    assert "Missing value for <text>" in output
    assert "USAGE: notes add <text>" in output


def test_subcommand_help(tree, capsys):
    assert main([tree, "--help", "add"]) == 0
    output = capsys.readouterr().err
    assert "USAGE: notes add <text>" in output


def test_help_path_follows_declared_commands():
    root = Command.root("git").command(
        "remote", configure=lambda remote: remote.command("add").command("show")
    )
    tokens = [command.token for command in help_path(root, ["remote", "show"])]
    assert tokens == ["git", "remote", "show"]
    tokens = [command.token for command in help_path(root, ["remote", "bogus"])]
    assert tokens == ["git", "remote"]
    assert help_path(root, []) == [root]


def test_help_for_unknown_command_shows_parent(tree, capsys):
    assert main([tree, "--help", "bogus"]) == 0
    output = capsys.readouterr().err
    assert "USAGE: notes <command>" in output
