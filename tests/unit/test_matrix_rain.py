"""Unit tests for the ambient matrix rain loop."""

import random

import pytest

from termcv.contexts.ambient import AmbientLoop, MatrixRain, build_ambient_loop
from termcv.contexts.terminal.theme import Theme


def _rain(width=140, height=140, **kwargs):
    return MatrixRain(width, height, rng=random.Random(7), **kwargs)


@pytest.mark.unit
def test_columns_follow_pitch():
    rain = _rain(width=145)

    assert rain.columns == 10
    assert len(rain.drops) == 10
    assert all(0 <= y < 140 for y in rain.drops)


@pytest.mark.unit
def test_step_advances_drawn_drops():
    rain = _rain(skip_probability=0.0)
    before = list(rain.drops)

    frame = rain.step(Theme.DARK)

    assert len(frame.draws) == rain.columns
    for i, draw in enumerate(frame.draws):
        assert draw.x == i * 14
        assert draw.y == before[i]
        assert draw.char in rain.glyphs
        assert rain.drops[i] == before[i] + 14


@pytest.mark.unit
def test_skip_probability_one_draws_nothing():
    rain = _rain(skip_probability=1.0)
    before = list(rain.drops)

    frame = rain.step(Theme.DARK)

    assert frame.draws == []
    assert rain.drops == before


@pytest.mark.unit
def test_drop_resets_past_bottom():
    rain = _rain(skip_probability=0.0, reset_margin=0)
    rain.drops = [141] * rain.columns

    rain.step(Theme.DARK)

    assert rain.drops == [0] * rain.columns


@pytest.mark.unit
def test_theme_selects_palette():
    rain = _rain()

    assert rain.step(Theme.LIGHT).color == "#0a7d56"
    assert rain.step(Theme.DARK).color == "#21e07d"


@pytest.mark.unit
def test_render_text_grid():
    rain = _rain(skip_probability=0.0)
    rain.drops = [0] * rain.columns

    text = rain.render_text(rain.step(Theme.DARK), rows=3)
    rows = text.split("\n")

    assert len(rows) == 3
    assert all(ch != " " for ch in rows[0])
    assert rows[1].strip() == ""


class TestAmbientLoop:
    """Test throttling and read-only theme access."""

    @pytest.mark.unit
    def test_throttles_to_interval(self):
        loop = AmbientLoop(_rain(), theme_getter=lambda: Theme.DARK, frame_interval_ms=90)

        assert loop.tick(0) is not None
        assert loop.tick(50) is None
        assert loop.tick(89.9) is None
        assert loop.tick(90) is not None
        assert loop.frames_drawn == 2

    @pytest.mark.unit
    def test_reads_theme_each_frame(self):
        themes = [Theme.LIGHT]
        loop = AmbientLoop(_rain(), theme_getter=lambda: themes[0])

        assert loop.tick(0).color == "#0a7d56"
        themes[0] = Theme.DARK
        assert loop.tick(1000).color == "#21e07d"

    @pytest.mark.unit
    def test_build_from_settings(self, settings):
        loop = build_ambient_loop(280, 140, lambda: Theme.DARK, rain_settings=settings.rain)

        assert loop.frame_interval_ms == 90
        assert loop.rain.columns == 20
        assert loop.rain.glyphs == settings.rain["glyphs"]
