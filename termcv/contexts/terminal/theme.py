"""
Two-valued theme flag.

Read by the ambient loop, toggled by the `theme` command, and persisted
through the preference store when one is attached.
"""

from enum import Enum
from typing import Optional

from termcv.utils.preferences import THEME_KEY, PreferenceStore


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class ThemeState:
    """
    Current theme plus optional persistence.

    Initial value: stored preference if valid, else the configured default.
    """

    def __init__(self, store: Optional[PreferenceStore] = None, default: str = "dark"):
        self.store = store
        stored = store.get(THEME_KEY) if store is not None else None
        try:
            self.current = Theme(stored or default)
        except ValueError:
            self.current = Theme(default)

    def toggle(self) -> Theme:
        """Flip light/dark and persist the new value."""
        self.set(self.current.opposite)
        return self.current

    def set(self, theme: Theme) -> None:
        self.current = theme
        if self.store is not None:
            self.store.set(THEME_KEY, theme.value)
