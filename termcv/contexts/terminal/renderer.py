"""
Output Rendering

The interpreter never talks to a display directly. It writes through an
OutputRenderer into an OutputSink, a small append / clear / scroll-to-end
capability:

- ScrollbackBuffer keeps lines in memory and can render them as escaped HTML
- ConsoleSink additionally echoes every line to the real terminal
"""

from typing import List, Protocol

import click
import typer
from jinja2 import Environment, Template

from termcv.contexts.terminal.models import LineStyle, OutputLine

SCROLLBACK_HTML = (
    "{% for line in lines %}"
    '<div class="line fade-in{% if line.style.value %} {{ line.style.value }}{% endif %}">'
    '{% if line.style.value == "prompt" %}<span class="cmd">{{ prompt_prefix }}</span>{% endif %}'
    "{{ line.text }}</div>\n"
    "{% endfor %}"
)

# Autoescape on: every interpolated value is HTML-escaped
_html_env = Environment(autoescape=True, keep_trailing_newline=True)

STYLE_COLORS = {
    LineStyle.ERROR: typer.colors.RED,
    LineStyle.PROMPT: typer.colors.GREEN,
}


class OutputSink(Protocol):
    """Display surface for scrollback lines."""

    def append(self, line: OutputLine) -> None: ...

    def clear(self) -> None: ...

    def scroll_to_end(self) -> None: ...


class ScrollbackBuffer:
    """
    In-memory scrollback.

    Append-only during a session except for a full clear. scroll_position
    tracks the index the view is scrolled to (always the end after an append).
    """

    def __init__(self, prompt_prefix: str = ""):
        self.prompt_prefix = prompt_prefix
        self.lines: List[OutputLine] = []
        self.scroll_position = 0
        self._template: Template = _html_env.from_string(SCROLLBACK_HTML)

    def append(self, line: OutputLine) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()
        self.scroll_position = 0

    def scroll_to_end(self) -> None:
        self.scroll_position = len(self.lines)

    def texts(self) -> List[str]:
        """Plain text of every line, prompt prefix included."""
        return [line.display_text(self.prompt_prefix) for line in self.lines]

    def render_html(self) -> str:
        """Render scrollback as one escaped <div class="line ..."> per line."""
        return self._template.render(lines=self.lines, prompt_prefix=self.prompt_prefix)


class ConsoleSink(ScrollbackBuffer):
    """
    Scrollback that also writes each line to the terminal.

    With echo_prompts=False, prompt lines are kept in scrollback but not
    printed, since a real terminal already shows what the user typed.
    """

    def __init__(self, prompt_prefix: str = "", echo_prompts: bool = True):
        super().__init__(prompt_prefix=prompt_prefix)
        self.echo_prompts = echo_prompts

    def append(self, line: OutputLine) -> None:
        super().append(line)
        if line.style is LineStyle.PROMPT and not self.echo_prompts:
            return
        typer.secho(line.display_text(self.prompt_prefix), fg=STYLE_COLORS.get(line.style))

    def clear(self) -> None:
        click.clear()
        super().clear()


class OutputRenderer:
    """
    Writes text into a sink.

    Every append is followed by scroll_to_end so the newest line stays visible.
    """

    def __init__(self, sink: OutputSink):
        self.sink = sink

    def print(self, text: str = "", style: LineStyle = LineStyle.DEFAULT) -> None:
        self.sink.append(OutputLine(text=text, style=style))
        self.sink.scroll_to_end()

    def print_error(self, text: str) -> None:
        self.print(text, LineStyle.ERROR)

    def print_block(self, text: str) -> None:
        """Print a multi-line block, one scrollback line per text line."""
        for line in text.split("\n"):
            self.print(line)

    def echo_prompt(self, command_text: str) -> None:
        """Echo submitted input into the transcript behind the prompt prefix."""
        self.print(command_text, LineStyle.PROMPT)

    def clear(self) -> None:
        self.sink.clear()
