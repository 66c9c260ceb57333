"""
Matrix Rain Backdrop

Falling-character animation drawn behind the terminal. Purely cosmetic: it
reads the theme through a callable and never touches interpreter state.

MatrixRain owns the drop positions and produces one frame of glyph draws per
step. AmbientLoop throttles steps to a fixed minimum interval, so a caller can
tick it on every display frame.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from termcv.contexts.terminal.theme import Theme

DEFAULT_GLYPHS = "アカサタナハマヤラ0123456789$#*+<>={}"
DEFAULT_COLORS = {
    "light": {"fade": "rgba(240,240,240,0.06)", "glyph": "#0a7d56"},
    "dark": {"fade": "rgba(0,0,0,0.06)", "glyph": "#21e07d"},
}


@dataclass(frozen=True)
class GlyphDraw:
    """One character drawn at pixel position (x, y)."""

    char: str
    x: int
    y: int


@dataclass(frozen=True)
class Frame:
    """
    One rendered frame.

    Attributes:
        fade: Translucent fill painted over the previous frame
        color: Glyph color
        draws: Characters drawn this frame
    """

    fade: str
    color: str
    draws: List[GlyphDraw]


class MatrixRain:
    """
    Drop state for a width x height surface.

    Args:
        width: Surface width in pixels
        height: Surface height in pixels
        column_pitch: Horizontal spacing (and vertical step) in pixels
        glyphs: Alphabet to draw from
        skip_probability: Chance a column skips drawing in a frame
        reset_margin: Upper bound of the random extra depth before a drop resets
        colors: Fade and glyph colors per theme name
        rng: Random source (seed it for deterministic frames)
    """

    def __init__(
        self,
        width: int,
        height: int,
        column_pitch: int = 14,
        glyphs: str = DEFAULT_GLYPHS,
        skip_probability: float = 0.25,
        reset_margin: int = 400,
        colors: Dict[str, Dict[str, str]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.column_pitch = column_pitch
        self.glyphs = glyphs
        self.skip_probability = skip_probability
        self.reset_margin = reset_margin
        self.colors = colors or DEFAULT_COLORS
        self.rng = rng or random.Random()
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Recompute columns and scatter drops over the new height."""
        self.width = width
        self.height = height
        self.columns = width // self.column_pitch
        self.drops = [self.rng.randrange(max(height, 1)) for _ in range(self.columns)]

    def step(self, theme: Theme) -> Frame:
        """Advance every drop by one row and return the draws for this frame."""
        palette = self.colors[theme.value]
        draws = []
        for i, y in enumerate(self.drops):
            # Sparsify
            if self.rng.random() < self.skip_probability:
                continue
            char = self.glyphs[self.rng.randrange(len(self.glyphs))]
            draws.append(GlyphDraw(char=char, x=i * self.column_pitch, y=y))
            if y > self.height + self.rng.random() * self.reset_margin:
                self.drops[i] = 0
            else:
                self.drops[i] = y + self.column_pitch
        return Frame(fade=palette["fade"], color=palette["glyph"], draws=draws)

    def render_text(self, frame: Frame, rows: int) -> str:
        """Render a frame's draws onto a character grid of `rows` lines."""
        grid = [[" "] * self.columns for _ in range(rows)]
        for draw in frame.draws:
            row = draw.y // self.column_pitch
            col = draw.x // self.column_pitch
            if 0 <= row < rows and 0 <= col < self.columns:
                grid[row][col] = draw.char
        return "\n".join("".join(line) for line in grid)


class AmbientLoop:
    """
    Throttled periodic driver for MatrixRain.

    tick() may be called at any cadence; it draws only when at least
    frame_interval_ms has elapsed since the last draw.
    """

    def __init__(
        self,
        rain: MatrixRain,
        theme_getter: Callable[[], Theme],
        frame_interval_ms: float = 90,
    ):
        self.rain = rain
        self.theme_getter = theme_getter
        self.frame_interval_ms = frame_interval_ms
        self.last_draw_ms: Optional[float] = None
        self.frames_drawn = 0

    def tick(self, timestamp_ms: float) -> Optional[Frame]:
        """
        Draw a frame if the interval has elapsed.

        Returns:
            The new Frame, or None if throttled
        """
        if self.last_draw_ms is not None and timestamp_ms - self.last_draw_ms < self.frame_interval_ms:
            return None
        self.last_draw_ms = timestamp_ms
        self.frames_drawn += 1
        return self.rain.step(self.theme_getter())


def build_ambient_loop(
    width: int,
    height: int,
    theme_getter: Callable[[], Theme],
    rain_settings: Dict = None,
    rng: Optional[random.Random] = None,
) -> AmbientLoop:
    """
    Build an AmbientLoop from the `rain` block of terminal.yaml.

    Args:
        width: Surface width in pixels
        height: Surface height in pixels
        theme_getter: Returns the current theme on each frame
        rain_settings: Parsed rain settings (missing keys use defaults)
        rng: Optional random source
    """
    rain_settings = rain_settings or {}
    rain = MatrixRain(
        width,
        height,
        column_pitch=rain_settings.get("column_pitch", 14),
        glyphs=rain_settings.get("glyphs", DEFAULT_GLYPHS),
        skip_probability=rain_settings.get("skip_probability", 0.25),
        reset_margin=rain_settings.get("reset_margin", 400),
        colors=rain_settings.get("colors"),
        rng=rng,
    )
    return AmbientLoop(
        rain, theme_getter, frame_interval_ms=rain_settings.get("frame_interval_ms", 90)
    )
