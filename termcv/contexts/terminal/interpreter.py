"""
Terminal Command Interpreter

Handles the Input -> Parse -> Dispatch -> Render loop of the terminal CV,
plus input history recall and the keyboard shortcuts of the input field.

Usage:
    from termcv.contexts.terminal import TerminalInterpreter

    interpreter = TerminalInterpreter.create()
    interpreter.start()
    interpreter.submit("skills")
    print("\n".join(interpreter.scrollback.texts()))
"""

from typing import Optional

from termcv.contexts.dataset import CVDataset, load_cv_dataset
from termcv.contexts.terminal.commands import (
    CommandRegistry,
    Opener,
    TerminalContext,
    build_command_table,
)
from termcv.contexts.terminal.logger import _log_debug, log_command_failure
from termcv.contexts.terminal.models import SessionState
from termcv.contexts.terminal.parser import parse_command_line
from termcv.contexts.terminal.renderer import OutputRenderer, ScrollbackBuffer
from termcv.contexts.terminal.settings import TerminalSettings, load_terminal_settings
from termcv.contexts.terminal.theme import ThemeState
from termcv.utils.preferences import PreferenceStore

CLEAR_COMMAND = "clear"


class TerminalInterpreter:
    """
    Simulated shell over the CV dataset.

    Owns the session state and the scrollback exclusively. Handler failures
    are contained at the dispatch boundary; nothing a command does can end
    the session.

    Attributes:
        context: Shared handler context (dataset, settings, session, output, theme)
        commands: Read-only command table
        input_value: Current content of the input field (driven by history recall)
    """

    def __init__(
        self,
        context: TerminalContext,
        commands: CommandRegistry = None,
        scrollback: ScrollbackBuffer = None,
    ):
        self.context = context
        self.commands = commands if commands is not None else build_command_table()
        self.scrollback = scrollback
        self.input_value = ""

    @classmethod
    def create(
        cls,
        dataset: CVDataset = None,
        settings: TerminalSettings = None,
        scrollback: ScrollbackBuffer = None,
        store: Optional[PreferenceStore] = None,
        opener: Opener = None,
    ) -> "TerminalInterpreter":
        """
        Build an interpreter with a fresh session.

        Args:
            dataset: CV record (defaults to the configured YAML dataset)
            settings: Terminal settings (defaults to terminal.yaml)
            scrollback: Output sink (defaults to an in-memory ScrollbackBuffer)
            store: Preference store for theme persistence (None disables persistence)
            opener: External URL/file opener (defaults to webbrowser.open)

        Returns:
            Ready-to-use TerminalInterpreter
        """
        if dataset is None:
            dataset = load_cv_dataset()
        if settings is None:
            settings = load_terminal_settings()
        if scrollback is None:
            scrollback = ScrollbackBuffer(prompt_prefix=settings.prompt_prefix)

        context_kwargs = {}
        if opener is not None:
            context_kwargs["opener"] = opener

        context = TerminalContext(
            dataset=dataset,
            settings=settings,
            session=SessionState(),
            output=OutputRenderer(scrollback),
            theme=ThemeState(store=store, default=settings.default_theme),
            **context_kwargs,
        )
        return cls(context, scrollback=scrollback)

    @property
    def session(self) -> SessionState:
        return self.context.session

    def start(self) -> None:
        """Print the banner and the welcome line."""
        self.context.output.print_block(self.context.dataset.ascii)
        self.context.output.print(self.context.settings.welcome)

    def submit(self, raw: str) -> None:
        """Echo raw input as a prompt line, reset the input field, then execute."""
        self.context.output.echo_prompt(raw)
        self.input_value = ""
        self.execute(raw)

    def execute(self, raw: str) -> None:
        """
        Execute one command line.

        Empty or whitespace-only input is a no-op. Every other line is
        recorded in history (found or not) before dispatch.
        """
        text = raw.strip()
        parsed = parse_command_line(text)
        if parsed is None:
            return

        self.session.record(text)
        output = self.context.output

        handler = self.commands.get(parsed.name)
        if handler is None:
            _log_debug(f"Unknown command: {parsed.name}")
            output.print_error(f"Command not found: {parsed.name}. Type 'help' for list.")
            return

        _log_debug(f"Dispatching '{parsed.name}' with args {list(parsed.args)}")
        try:
            if self.session.auto_clear and parsed.name != CLEAR_COMMAND:
                output.clear()
            handler(self.context, parsed.args)
        except Exception as e:
            log_command_failure(parsed.name, e)
            output.print_error(f"Command error: {e}")

    # History recall

    def history_up(self) -> str:
        """Recall the previous (older) history entry into the input field."""
        session = self.session
        if session.history_cursor > 0:
            session.history_cursor -= 1
            self.input_value = session.history[session.history_cursor]
        return self.input_value

    def history_down(self) -> str:
        """Recall the next (newer) entry; past the newest, the field is blank."""
        session = self.session
        if session.history_cursor < len(session.history):
            session.history_cursor += 1
            if session.history_cursor == len(session.history):
                self.input_value = ""
            else:
                self.input_value = session.history[session.history_cursor]
        return self.input_value

    def handle_key(self, key: str, ctrl: bool = False) -> bool:
        """
        Handle a key press on the input field.

        ArrowUp / ArrowDown drive history recall; Ctrl+L clears the scrollback
        the same way the clear command does, without entering history.

        Returns:
            True if the key was handled
        """
        if key == "ArrowUp":
            self.history_up()
        elif key == "ArrowDown":
            self.history_down()
        elif ctrl and key.lower() == "l":
            self.commands.get(CLEAR_COMMAND)(self.context, ())
        else:
            return False
        return True
