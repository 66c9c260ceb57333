#!/usr/bin/env python3
"""
Command-line host for the interactive terminal CV.

Runs the simulated shell in a real terminal, executes single command lines,
or previews the matrix rain backdrop.

Commands:
    shell - Interactive session (type 'exit' or 'quit' to leave)
    run   - Execute one command line and print the transcript
    rain  - Preview the ambient backdrop for a number of frames
"""

import random
import time
from typing import List, Optional

import click
import typer

from termcv.contexts.ambient import build_ambient_loop
from termcv.contexts.dataset import InvalidCVDataError, load_localized_dataset
from termcv.contexts.terminal import (
    ConsoleSink,
    ScrollbackBuffer,
    TerminalInterpreter,
    ThemeState,
    load_terminal_settings,
)
from termcv.contexts.terminal.logger import _log_info, setup_terminal_logger
from termcv.contexts.terminal.renderer import STYLE_COLORS
from termcv.utils.preferences import (
    AVAILABLE_LANGUAGES,
    LANGUAGE_KEY,
    PreferenceStore,
    resolve_language,
)
from termcv.utils.timestamp import format_timestamp

EXIT_COMMANDS = {"exit", "quit"}

app = typer.Typer(
    add_completion=False,
    help="Interactive terminal CV",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _build_interpreter(
    store: PreferenceStore, language: str, scrollback: ScrollbackBuffer = None
) -> TerminalInterpreter:
    """Load dataset and settings, exiting with a red message on invalid data."""
    settings = load_terminal_settings()
    try:
        dataset = load_localized_dataset(language)
    except InvalidCVDataError as e:
        typer.secho(f"Invalid CV dataset: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if scrollback is None:
        scrollback = ScrollbackBuffer(prompt_prefix=settings.prompt_prefix)
    else:
        scrollback.prompt_prefix = settings.prompt_prefix

    return TerminalInterpreter.create(
        dataset=dataset, settings=settings, scrollback=scrollback, store=store
    )


def _validate_language(lang: Optional[str]) -> Optional[str]:
    if lang is not None and lang not in AVAILABLE_LANGUAGES:
        raise typer.BadParameter(f"Language must be one of: {', '.join(AVAILABLE_LANGUAGES)}")
    return lang


@app.command("shell")
def shell_command(
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        "-l",
        help="CV language (en|ro); stored as the new preference",
        callback=_validate_language,
    ),
):
    """
    Start an interactive terminal CV session.

    Examples:\n

        $ terminal_cv.py shell            # Use stored or detected language

        $ terminal_cv.py shell --lang ro  # Switch to Romanian and remember it
    """
    store = PreferenceStore()
    if lang:
        store.set(LANGUAGE_KEY, lang)
    language = resolve_language(store)

    setup_terminal_logger(language=language, console_level="WARNING")

    interpreter = _build_interpreter(store, language, scrollback=ConsoleSink(echo_prompts=False))
    _log_info(f"Session started at {format_timestamp(interpreter.session.started_at)}")
    interpreter.start()

    prompt = interpreter.context.settings.prompt_prefix
    while True:
        try:
            raw = input(prompt)
        except (EOFError, KeyboardInterrupt):
            typer.echo()
            break

        if raw.strip().lower() in EXIT_COMMANDS:
            break
        interpreter.submit(raw)

    _log_info(
        f"Session ended after {len(interpreter.session.history)} command(s), "
        f"started {format_timestamp(interpreter.session.started_at, relative=True)}"
    )


@app.command("run")
def run_command(
    command: List[str] = typer.Argument(..., help="Command line to execute (e.g., search PL/SQL)"),
    lang: Optional[str] = typer.Option(
        None, "--lang", "-l", help="CV language (en|ro) for this run only", callback=_validate_language
    ),
):
    """
    Execute one command line and print the resulting transcript.

    Examples:\n

        $ terminal_cv.py run skills

        $ terminal_cv.py run search oracle
    """
    store = PreferenceStore()
    language = lang or resolve_language(store)

    setup_terminal_logger(language=language, console_level="WARNING")

    interpreter = _build_interpreter(store, language)
    interpreter.submit(" ".join(command))

    for line in interpreter.scrollback.lines:
        typer.secho(
            line.display_text(interpreter.scrollback.prompt_prefix),
            fg=STYLE_COLORS.get(line.style),
        )


@app.command("rain")
def rain_command(
    frames: int = typer.Option(20, "--frames", "-f", min=1, help="Number of frames to draw"),
    width: int = typer.Option(560, "--width", "-w", min=14, help="Surface width in pixels"),
    height: int = typer.Option(280, "--height", "-h", min=14, help="Surface height in pixels"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for repeatable frames"),
):
    """
    Preview the matrix rain backdrop in the terminal.

    Examples:\n

        $ terminal_cv.py rain --frames 50
    """
    settings = load_terminal_settings()
    theme = ThemeState(store=PreferenceStore(), default=settings.default_theme)
    loop = build_ambient_loop(
        width,
        height,
        theme_getter=lambda: theme.current,
        rain_settings=settings.rain,
        rng=random.Random(seed),
    )
    rows = height // loop.rain.column_pitch
    interval_s = loop.frame_interval_ms / 1000

    try:
        while loop.frames_drawn < frames:
            frame = loop.tick(time.monotonic() * 1000)
            if frame is None:
                time.sleep(interval_s / 4)
                continue
            click.clear()
            typer.secho(loop.rain.render_text(frame, rows), fg=typer.colors.GREEN)
    except KeyboardInterrupt:
        typer.echo()


if __name__ == "__main__":
    app()
