"""
TERMCV - Terminal CV

An interactive, terminal-style CV: a static structured dataset rendered as plain
text and driven by a small simulated shell.

Architecture:
- Dataset Context: Static CV record and pure section formatters
- Terminal Context: Command parsing, dispatch, history, and scrollback output
- Ambient Context: Cosmetic falling-character backdrop that only reads the theme
"""

__version__ = "0.1.0"
