"""
Persisted user preferences.

Two independent string preferences survive between sessions, each under a
fixed key in a small JSON file:

    cv_language -> "en" | "ro"
    cv_theme    -> "light" | "dark"

Interpreter session state (history, autoClear) is never written here.

Usage:
    from termcv.utils.preferences import PreferenceStore, LANGUAGE_KEY

    store = PreferenceStore()
    store.set(LANGUAGE_KEY, "ro")
    store.get(LANGUAGE_KEY)  # "ro"
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

load_dotenv()
PREFS_PATH = Path(os.getenv("TERMCV_PREFS_PATH", "outs/preferences.json"))

LANGUAGE_KEY = "cv_language"
THEME_KEY = "cv_theme"

DEFAULT_LANGUAGE = "en"
AVAILABLE_LANGUAGES = ("en", "ro")


class PreferenceStore:
    """
    Key-value store backed by a JSON file.

    Reads never fail: a missing or corrupt file behaves like an empty store.
    """

    def __init__(self, path: Path = None):
        if path is None:
            path = PREFS_PATH
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        """Return stored value for key, or None if unset."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Store value under key, keeping every other key intact."""
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def detect_language(env_value: Optional[str] = None) -> Optional[str]:
    """
    Detect a supported language from a locale string such as "ro_RO.UTF-8".

    Args:
        env_value: Locale string (defaults to the LANG environment variable)

    Returns:
        Supported language code, or None if the locale is unsupported
    """
    if env_value is None:
        env_value = os.getenv("LANG", "")
    code = env_value.lower().replace("-", "_").split("_")[0].split(".")[0]
    return code if code in AVAILABLE_LANGUAGES else None


def resolve_language(store: PreferenceStore, env_value: Optional[str] = None) -> str:
    """
    Resolve the active language.

    Priority: stored preference > locale detection > default ("en").
    """
    stored = store.get(LANGUAGE_KEY)
    if stored in AVAILABLE_LANGUAGES:
        return stored
    return detect_language(env_value) or DEFAULT_LANGUAGE
