"""Shared fixtures: bundled dataset, settings, and an interpreter with recorded opens."""

import pytest

from termcv.contexts.dataset import load_cv_dataset
from termcv.contexts.terminal import TerminalInterpreter, load_terminal_settings
from termcv.utils.preferences import PreferenceStore


@pytest.fixture(scope="session")
def dataset():
    return load_cv_dataset()


@pytest.fixture(scope="session")
def settings():
    return load_terminal_settings()


@pytest.fixture
def store(tmp_path):
    return PreferenceStore(tmp_path / "preferences.json")


@pytest.fixture
def opened():
    """Targets passed to the external opener, in call order."""
    return []


@pytest.fixture
def interpreter(dataset, settings, store, opened):
    return TerminalInterpreter.create(
        dataset=dataset, settings=settings, store=store, opener=opened.append
    )
