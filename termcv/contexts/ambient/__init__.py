"""
Ambient Context

Responsibilities:
- Generates the falling-character backdrop frame by frame
- Throttles drawing to a fixed minimum interval

Owns: Drop positions
Never: Reads or writes interpreter session state (theme is read-only)
"""

from termcv.contexts.ambient.matrix_rain import (
    AmbientLoop,
    Frame,
    GlyphDraw,
    MatrixRain,
    build_ambient_loop,
)

__all__ = ["AmbientLoop", "Frame", "GlyphDraw", "MatrixRain", "build_ambient_loop"]
