"""Unit tests for terminal settings loading."""

import pytest

from termcv.contexts.terminal.settings import TerminalSettings, load_terminal_settings


@pytest.mark.unit
def test_bundled_settings(settings):
    assert settings.prompt_prefix == "claudiu@cv:~$ "
    assert settings.links["cv"] == "CV-Claudiu-Morogan.pdf"
    assert settings.goto_sections == ["about", "skills", "experience", "education"]
    assert settings.default_theme == "dark"
    assert settings.rain["frame_interval_ms"] == 90


@pytest.mark.unit
def test_custom_settings_file_with_defaults(tmp_path):
    config_path = tmp_path / "terminal.yaml"
    config_path.write_text("prompt:\n  user: guest\nlinks:\n  cv: cv.pdf\n", encoding="utf-8")

    settings = load_terminal_settings(config_path)

    assert settings.prompt_prefix == "guest@cv:~$ "
    assert settings.links == {"cv": "cv.pdf"}
    assert settings.goto_sections == []
    assert settings.rain == {}


@pytest.mark.unit
def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        TerminalSettings().user = "root"
