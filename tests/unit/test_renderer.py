"""Unit tests for scrollback sinks and the output renderer."""

import pytest

from termcv.contexts.terminal.models import LineStyle, OutputLine
from termcv.contexts.terminal.renderer import ConsoleSink, OutputRenderer, ScrollbackBuffer

PREFIX = "claudiu@cv:~$ "


@pytest.fixture
def buffer():
    return ScrollbackBuffer(prompt_prefix=PREFIX)


@pytest.mark.unit
def test_print_appends_and_scrolls(buffer):
    renderer = OutputRenderer(buffer)

    renderer.print("one")
    renderer.print_error("two")

    assert buffer.lines == [OutputLine("one"), OutputLine("two", LineStyle.ERROR)]
    assert buffer.scroll_position == 2


@pytest.mark.unit
def test_print_block_splits_lines(buffer):
    OutputRenderer(buffer).print_block("a\nb\n")

    assert buffer.texts() == ["a", "b", ""]


@pytest.mark.unit
def test_prompt_line_carries_prefix(buffer):
    OutputRenderer(buffer).echo_prompt("HeLp me")

    assert buffer.texts() == [f"{PREFIX}HeLp me"]
    assert buffer.lines[0].text == "HeLp me"


@pytest.mark.unit
def test_clear_empties_buffer(buffer):
    renderer = OutputRenderer(buffer)
    renderer.print("x")
    renderer.clear()

    assert buffer.lines == []
    assert buffer.scroll_position == 0


class TestRenderHtml:
    """Test HTML rendering of the scrollback."""

    @pytest.mark.unit
    def test_dynamic_text_is_escaped(self, buffer):
        OutputRenderer(buffer).print("<script>alert('x')</script> & more")

        html = buffer.render_html()

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "&amp; more" in html

    @pytest.mark.unit
    def test_prompt_input_is_escaped(self, buffer):
        OutputRenderer(buffer).echo_prompt("<b>help</b>")

        html = buffer.render_html()

        assert '<span class="cmd">claudiu@cv:~$ </span>' in html
        assert "&lt;b&gt;help&lt;/b&gt;" in html

    @pytest.mark.unit
    def test_style_classes(self, buffer):
        renderer = OutputRenderer(buffer)
        renderer.print("plain")
        renderer.print_error("bad")

        lines = buffer.render_html().splitlines()

        assert lines[0] == '<div class="line fade-in">plain</div>'
        assert lines[1] == '<div class="line fade-in error">bad</div>'


@pytest.mark.unit
def test_console_sink_prints_lines(capsys):
    sink = ConsoleSink(prompt_prefix=PREFIX)
    renderer = OutputRenderer(sink)

    renderer.echo_prompt("about")
    renderer.print("Hello")

    out = capsys.readouterr().out
    assert f"{PREFIX}about" in out
    assert "Hello" in out
    assert len(sink.lines) == 2


@pytest.mark.unit
def test_console_sink_can_skip_prompt_echo(capsys):
    sink = ConsoleSink(prompt_prefix=PREFIX, echo_prompts=False)
    renderer = OutputRenderer(sink)

    renderer.echo_prompt("about")
    renderer.print("Hello")

    out = capsys.readouterr().out
    assert "about" not in out
    assert "Hello" in out
    assert sink.texts() == [f"{PREFIX}about", "Hello"]


@pytest.mark.unit
def test_console_sink_clear_wipes_screen_and_scrollback(monkeypatch):
    calls = []
    monkeypatch.setattr("termcv.contexts.terminal.renderer.click.clear", lambda: calls.append(1))
    sink = ConsoleSink(prompt_prefix=PREFIX)
    OutputRenderer(sink).print("Hello")

    sink.clear()

    assert calls == [1]
    assert sink.lines == []


@pytest.mark.unit
def test_console_sink_keeps_scrollback_when_screen_clear_fails(monkeypatch):
    def broken():
        raise OSError("no terminal")

    monkeypatch.setattr("termcv.contexts.terminal.renderer.click.clear", broken)
    sink = ConsoleSink(prompt_prefix=PREFIX)
    OutputRenderer(sink).print("Hello")

    with pytest.raises(OSError):
        sink.clear()

    assert sink.texts() == ["Hello"]
