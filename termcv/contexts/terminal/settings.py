"""
Terminal Settings

Loads terminal.yaml (prompt identity, external links, goto sections, rain
parameters) through OmegaConf and exposes it as a typed record.

Examples:
    >>> settings = load_terminal_settings()
    >>> settings.prompt_prefix
    'claudiu@cv:~$ '
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "terminal.yaml"
TERMINAL_CONFIG_PATH = Path(os.getenv("TERMCV_CONFIG_PATH", str(DEFAULT_CONFIG_PATH)))


@dataclass(frozen=True)
class TerminalSettings:
    """
    Terminal configuration.

    Attributes:
        user: Prompt user name (the "<user>" in "<user>@cv:~$ ")
        host: Prompt host name
        cwd: Prompt working directory
        links: External targets keyed by name (linkedin, github, cv)
        goto_sections: Section names accepted by the goto command
        welcome: Line printed after the banner at startup
        default_theme: Theme used when no preference is stored
        rain: Raw ambient rain parameters
    """

    user: str = "claudiu"
    host: str = "cv"
    cwd: str = "~"
    links: Dict[str, str] = field(default_factory=dict)
    goto_sections: List[str] = field(default_factory=list)
    welcome: str = ""
    default_theme: str = "dark"
    rain: Dict[str, Any] = field(default_factory=dict)

    @property
    def prompt_prefix(self) -> str:
        return f"{self.user}@{self.host}:{self.cwd}$ "


def load_terminal_settings(config_path: Path = None) -> TerminalSettings:
    """
    Load terminal settings from YAML.

    Args:
        config_path: Optional path to config file (defaults to TERMCV_CONFIG_PATH)

    Returns:
        TerminalSettings populated from the file
    """
    if config_path is None:
        config_path = TERMINAL_CONFIG_PATH

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    prompt = config.get("prompt", {})
    return TerminalSettings(
        user=prompt.get("user", "claudiu"),
        host=prompt.get("host", "cv"),
        cwd=prompt.get("cwd", "~"),
        links=dict(config.get("links", {})),
        goto_sections=list(config.get("goto_sections", [])),
        welcome=config.get("welcome", ""),
        default_theme=config.get("theme", {}).get("default", "dark"),
        rain=dict(config.get("rain", {})),
    )
