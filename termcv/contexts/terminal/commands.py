"""
Command Table

Maps command names to plain handler functions. Every handler has the same
shape, handler(ctx, args), and writes its output through ctx.output. The
table is filled once when the interpreter is built and is read-only after.
"""

import webbrowser
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from termcv.contexts.dataset import (
    CVDataset,
    render_basic,
    render_contact,
    render_education,
    render_experience,
    render_skills,
    search_experience,
)
from termcv.contexts.terminal.logger import _log_info
from termcv.contexts.terminal.models import SessionState
from termcv.contexts.terminal.renderer import OutputRenderer
from termcv.contexts.terminal.settings import TerminalSettings
from termcv.contexts.terminal.theme import ThemeState

Opener = Callable[[str], object]

TRUE_VALUES = {"on", "true"}
FALSE_VALUES = {"off", "false"}


@dataclass
class TerminalContext:
    """
    Everything a handler may read or mutate.

    Attributes:
        dataset: Immutable CV record
        settings: Terminal configuration (links, goto sections)
        session: History and auto-clear state
        output: Renderer over the scrollback sink
        theme: Light/dark flag
        opener: Opens external URLs and files (defaults to webbrowser.open)
    """

    dataset: CVDataset
    settings: TerminalSettings
    session: SessionState
    output: OutputRenderer
    theme: ThemeState
    opener: Opener = webbrowser.open


Handler = Callable[[TerminalContext, Sequence[str]], None]


class CommandRegistry:
    """Registry of command handlers keyed by unique lowercase name."""

    def __init__(self):
        self._commands: Dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        if name in self._commands:
            raise ValueError(f"Command '{name}' is already registered")
        self._commands[name] = handler

    def get(self, name: str) -> Optional[Handler]:
        return self._commands.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._commands)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _open_url(ctx: TerminalContext, url: str) -> None:
    _log_info(f"Opening {url}")
    ctx.opener(url)


def _download_cv(ctx: TerminalContext) -> None:
    _open_url(ctx, ctx.settings.links["cv"])


# Static sections


def cmd_help(ctx: TerminalContext, args: Sequence[str]) -> None:
    ctx.output.print_block(ctx.dataset.help)


def cmd_about(ctx: TerminalContext, args: Sequence[str]) -> None:
    ctx.output.print_block(ctx.dataset.about)


def cmd_basic(ctx: TerminalContext, args: Sequence[str]) -> None:
    ctx.output.print_block(render_basic(ctx.dataset))


def cmd_skills(ctx: TerminalContext, args: Sequence[str]) -> None:
    ctx.output.print_block(render_skills(ctx.dataset))


def cmd_experience(ctx: TerminalContext, args: Sequence[str]) -> None:
    ctx.output.print_block(render_experience(ctx.dataset))


def cmd_education(ctx: TerminalContext, args: Sequence[str]) -> None:
    ctx.output.print_block(render_education(ctx.dataset))


def cmd_contact(ctx: TerminalContext, args: Sequence[str]) -> None:
    for line in render_contact(ctx.dataset):
        ctx.output.print(line)


def cmd_ascii(ctx: TerminalContext, args: Sequence[str]) -> None:
    ctx.output.print_block(ctx.dataset.ascii)


# Session and display


def cmd_clear(ctx: TerminalContext, args: Sequence[str]) -> None:
    ctx.output.clear()


def cmd_theme(ctx: TerminalContext, args: Sequence[str]) -> None:
    theme = ctx.theme.toggle()
    _log_info(f"Theme switched to {theme.value}")


def cmd_settings(ctx: TerminalContext, args: Sequence[str]) -> None:
    if not args:
        ctx.output.print(f"autoClear = {_bool_text(ctx.session.auto_clear)}")
        return

    key = args[0]
    value = args[1] if len(args) > 1 else None
    if key != "autoclear":
        ctx.output.print_error("Unknown setting key")
        return

    if value in TRUE_VALUES:
        ctx.session.auto_clear = True
        ctx.output.print("autoClear enabled")
    elif value in FALSE_VALUES:
        ctx.session.auto_clear = False
        ctx.output.print("autoClear disabled")
    else:
        ctx.output.print_error("Usage: settings autoclear <on|off>")


def cmd_autoclear(ctx: TerminalContext, args: Sequence[str]) -> None:
    if not args:
        ctx.session.auto_clear = not ctx.session.auto_clear
    elif args[0] == "on":
        ctx.session.auto_clear = True
    elif args[0] == "off":
        ctx.session.auto_clear = False
    else:
        ctx.output.print_error("Usage: autoclear [on|off]")
        return
    ctx.output.print(f"autoClear -> {_bool_text(ctx.session.auto_clear)}")


# External targets and navigation


def cmd_open(ctx: TerminalContext, args: Sequence[str]) -> None:
    if not args:
        ctx.output.print_error("Usage: open <linkedin|github|cv>")
        return

    target = args[0]
    if target in ("linkedin", "github"):
        _open_url(ctx, ctx.settings.links[target])
    elif target == "cv":
        _download_cv(ctx)
    else:
        ctx.output.print_error(f"Unknown target: {target}")


def cmd_download(ctx: TerminalContext, args: Sequence[str]) -> None:
    if args and args[0] == "cv":
        _download_cv(ctx)
    else:
        ctx.output.print_error("Usage: download cv")


def cmd_goto(ctx: TerminalContext, args: Sequence[str]) -> None:
    sections = ctx.settings.goto_sections
    if not args or args[0] not in sections:
        ctx.output.print_error(f"Usage: goto <{'|'.join(sections)}>")
        return
    # Acknowledgement only, the page has no sections to scroll to
    ctx.output.print(f"(scrolling to {args[0]})")


def cmd_search(ctx: TerminalContext, args: Sequence[str]) -> None:
    if not args:
        ctx.output.print_error("Usage: search <keyword>")
        return
    ctx.output.print_block(search_experience(ctx.dataset, " ".join(args)))


DEFAULT_COMMANDS: Dict[str, Handler] = {
    "help": cmd_help,
    "about": cmd_about,
    "basic": cmd_basic,
    "skills": cmd_skills,
    "experience": cmd_experience,
    "education": cmd_education,
    "contact": cmd_contact,
    "clear": cmd_clear,
    "theme": cmd_theme,
    "ascii": cmd_ascii,
    "open": cmd_open,
    "download": cmd_download,
    "goto": cmd_goto,
    "search": cmd_search,
    "settings": cmd_settings,
    "autoclear": cmd_autoclear,
}


def build_command_table(commands: Dict[str, Handler] = None) -> CommandRegistry:
    """
    Build the command table.

    Args:
        commands: Name to handler mapping (defaults to DEFAULT_COMMANDS)

    Returns:
        Populated CommandRegistry
    """
    if commands is None:
        commands = DEFAULT_COMMANDS

    registry = CommandRegistry()
    for name, handler in commands.items():
        registry.register(name, handler)
    return registry
