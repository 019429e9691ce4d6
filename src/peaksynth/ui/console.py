"""Console configuration and theme for PeakSynth UI.

This module provides the central console instance and theme used throughout
the application for consistent styling.
"""

import os

from rich.console import Console
from rich.theme import Theme

from peaksynth import __version__ as _PKG_VERSION

PEAKSYNTH_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        "neutral": "dim white",
        # --- UI Structure ---
        "header": "bold cyan",
        "subheader": "bold white",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "path": "blue underline",
        "code": "bold magenta",
        # --- Progress ---
        "progress.description": "bold white",
        "progress.percentage": "green",
        "progress.elapsed": "dim white",
    }
)

# Single console instance for entire application
console = Console(theme=PEAKSYNTH_THEME)

VERSION = _PKG_VERSION

_EMOJI_DISABLED = os.getenv("PEAKSYNTH_NO_EMOJI", "").lower() in {"1", "true", "yes"}

_ICONS = {
    "check": ("✓", "OK"),
    "cross": ("✗", "X"),
    "warn": ("⚠", "!"),
    "arrow": ("→", "->"),
}


def icon(name: str) -> str:
    """Return a status glyph, or its ASCII fallback when emoji are disabled."""
    glyph, fallback = _ICONS[name]
    return fallback if _EMOJI_DISABLED else glyph


__all__ = ["PEAKSYNTH_THEME", "VERSION", "console", "icon"]
