"""Unit tests for the theme flag."""

import pytest

from termcv.contexts.terminal.theme import Theme, ThemeState
from termcv.utils.preferences import THEME_KEY


@pytest.mark.unit
def test_default_without_store():
    assert ThemeState().current is Theme.DARK
    assert ThemeState(default="light").current is Theme.LIGHT


@pytest.mark.unit
def test_stored_theme_wins(store):
    store.set(THEME_KEY, "light")

    assert ThemeState(store=store, default="dark").current is Theme.LIGHT


@pytest.mark.unit
def test_unknown_stored_value_falls_back(store):
    store.set(THEME_KEY, "sepia")

    assert ThemeState(store=store).current is Theme.DARK


@pytest.mark.unit
def test_toggle_twice_round_trips_and_persists(store):
    theme = ThemeState(store=store)

    assert theme.toggle() is Theme.LIGHT
    assert store.get(THEME_KEY) == "light"
    assert theme.toggle() is Theme.DARK
    assert store.get(THEME_KEY) == "dark"
