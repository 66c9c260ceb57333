"""
Terminal Data Structures

Parsed commands, rendered output lines, and the per-session interpreter state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from termcv.utils.timestamp import now_exact


class LineStyle(Enum):
    DEFAULT = ""
    ERROR = "error"
    PROMPT = "prompt"


@dataclass(frozen=True)
class ParsedCommand:
    """
    One parsed input line.

    Attributes:
        name: Lowercased first token
        args: Remaining tokens, casing preserved
    """

    name: str
    args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OutputLine:
    """
    One scrollback line.

    Attributes:
        text: Raw line text (for prompt lines, the submitted command)
        style: Rendering style
    """

    text: str
    style: LineStyle = LineStyle.DEFAULT

    def display_text(self, prompt_prefix: str = "") -> str:
        """Plain-text form; prompt lines carry the prompt prefix."""
        if self.style is LineStyle.PROMPT:
            return f"{prompt_prefix}{self.text}"
        return self.text


@dataclass
class SessionState:
    """
    Mutable interpreter session state. Never persisted.

    Attributes:
        history: Submitted command lines, oldest first
        history_cursor: Recall position in [0, len(history)]
        auto_clear: Wipe scrollback before each command's output
        started_at: ISO timestamp of session start
    """

    history: List[str] = field(default_factory=list)
    history_cursor: int = 0
    auto_clear: bool = False
    started_at: str = field(default_factory=now_exact)

    def record(self, command_line: str) -> None:
        """Append to history and park the cursor past the end."""
        self.history.append(command_line)
        self.history_cursor = len(self.history)
