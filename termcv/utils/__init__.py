"""
Shared utilities for TERMCV.

Common functionality used across contexts:
- Logger setup
- Timestamps
- Persisted preferences (language, theme)
"""

from termcv.utils.preferences import PreferenceStore, resolve_language
from termcv.utils.timestamp import now_exact

__all__ = ["PreferenceStore", "resolve_language", "now_exact"]
