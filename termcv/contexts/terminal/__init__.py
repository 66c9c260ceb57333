"""
Terminal Context

Responsibilities:
- Parses typed input into a command name and arguments
- Dispatches to a fixed command table and contains handler failures
- Keeps input history, recall cursor, and the auto-clear mode
- Writes output lines into a scrollback sink

Owns: Session state, scrollback
Never: Modifies the CV dataset
"""

from termcv.contexts.terminal.commands import (
    CommandRegistry,
    TerminalContext,
    build_command_table,
)
from termcv.contexts.terminal.interpreter import TerminalInterpreter
from termcv.contexts.terminal.models import LineStyle, OutputLine, ParsedCommand, SessionState
from termcv.contexts.terminal.parser import parse_command_line
from termcv.contexts.terminal.renderer import (
    ConsoleSink,
    OutputRenderer,
    OutputSink,
    ScrollbackBuffer,
)
from termcv.contexts.terminal.settings import TerminalSettings, load_terminal_settings
from termcv.contexts.terminal.theme import Theme, ThemeState

__all__ = [
    # Interpreter and dispatch
    "TerminalInterpreter",
    "TerminalContext",
    "CommandRegistry",
    "build_command_table",
    "parse_command_line",
    # Data structures
    "LineStyle",
    "OutputLine",
    "ParsedCommand",
    "SessionState",
    # Output
    "ConsoleSink",
    "OutputRenderer",
    "OutputSink",
    "ScrollbackBuffer",
    # Configuration and theme
    "TerminalSettings",
    "load_terminal_settings",
    "Theme",
    "ThemeState",
]
