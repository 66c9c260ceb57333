"""Unit tests for command line parsing."""

import pytest

from termcv.contexts.terminal.models import ParsedCommand
from termcv.contexts.terminal.parser import parse_command_line


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["", "   ", "\t \n"])
def test_empty_input_is_none(raw):
    """Whitespace-only lines are a no-op, not an error."""
    assert parse_command_line(raw) is None


@pytest.mark.unit
def test_name_is_lowercased_args_keep_case():
    """Command name is case-folded; arguments are passed verbatim."""
    parsed = parse_command_line("SeArCh PL/SQL Oracle")

    assert parsed == ParsedCommand(name="search", args=("PL/SQL", "Oracle"))


@pytest.mark.unit
def test_runs_of_whitespace_split_once():
    """Tabs and repeated spaces separate tokens without producing empty args."""
    parsed = parse_command_line("  settings \t autoclear    on  ")

    assert parsed.name == "settings"
    assert parsed.args == ("autoclear", "on")


@pytest.mark.unit
def test_no_quoting_support():
    """Quotes are ordinary characters, so quoted phrases still split on spaces."""
    parsed = parse_command_line('search "web developer"')

    assert parsed.args == ('"web', 'developer"')


@pytest.mark.unit
def test_parsed_command_is_immutable():
    parsed = parse_command_line("help")

    with pytest.raises(AttributeError):
        parsed.name = "about"
