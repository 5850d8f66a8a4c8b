# tests/integration/test_cli_help.py
# Integration tests for root & command help output

import pytest
from typer.testing import CliRunner

ENV = {"NO_COLOR": "1", "TERM": "dumb"}


# * Ensure the root help lists every command
def test_main_help_lists_commands():
    from gitguy.cli.app import app

    result = CliRunner().invoke(app, ["--help"], env=ENV)

    assert result.exit_code == 0
    for command in ("diff", "generate", "review", "config"):
        assert command in result.stdout


# * Ensure a bare invocation shows help instead of failing
def test_bare_invocation_shows_help():
    from gitguy.cli.app import app

    result = CliRunner().invoke(app, [], env=ENV)

    assert result.exit_code == 0
    assert "Usage" in result.stdout
    assert "generate" in result.stdout


# * Ensure each command's help describes its options
@pytest.mark.parametrize(
    "command, expected",
    [
        ("diff", "--staged"),
        ("generate", "--ref-incoming"),
        ("review", "--pr-template"),
        ("config", "settings"),
    ],
)
def test_command_help(command, expected):
    from gitguy.cli.app import app

    result = CliRunner().invoke(app, [command, "--help"], env=ENV)

    assert result.exit_code == 0
    assert expected in result.stdout
