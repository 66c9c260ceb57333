"""Command line parsing: whitespace tokenization, no quoting or escaping."""

from typing import Optional

from termcv.contexts.terminal.models import ParsedCommand


def parse_command_line(raw: str) -> Optional[ParsedCommand]:
    """
    Parse a raw input line.

    The first token is lowercased so command names match case-insensitively;
    arguments keep the user's casing. Arguments containing spaces cannot be
    expressed.

    Args:
        raw: Raw input text

    Returns:
        ParsedCommand, or None if the line is empty or whitespace-only
    """
    parts = raw.split()
    if not parts:
        return None
    return ParsedCommand(name=parts[0].lower(), args=tuple(parts[1:]))
