"""Color theme registry and ANSI palette resolution.

Themes are cosmetic ``(border, highlight)`` hex pairs. The registry order is
fixed so cycling is deterministic; only the resulting pair is persisted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")
RESET = "\033[0m"


@dataclass(frozen=True)
class Theme:
    """Border/highlight color pair; ``name`` is display-only."""

    border_color: str
    highlight_color: str
    name: str = field(default="", compare=False)


THEMES: tuple[Theme, ...] = (
    Theme("#FF69B4", "#FF1493", "Hot Pink"),
    Theme("#00CED1", "#00FFFF", "Turquoise"),
    Theme("#9370DB", "#BA55D3", "Purple"),
    Theme("#FF6347", "#FF4500", "Tomato"),
    Theme("#32CD32", "#7FFF00", "Lime Green"),
    Theme("#FFD700", "#FFA500", "Gold"),
    Theme("#4169E1", "#1E90FF", "Royal Blue"),
    Theme("#FF1493", "#FF69B4", "Deep Pink"),
    Theme("#00FA9A", "#00FF7F", "Spring Green"),
    Theme("#FF8C00", "#FF6347", "Dark Orange"),
    Theme("#8A2BE2", "#9400D3", "Blue Violet"),
    Theme("#DC143C", "#FF0000", "Crimson"),
    Theme("#00BFFF", "#87CEEB", "Deep Sky Blue"),
    Theme("#ADFF2F", "#FFFF00", "Green Yellow"),
    Theme("#FF00FF", "#DA70D6", "Magenta"),
)

DEFAULT_THEME = THEMES[0]


@dataclass(frozen=True)
class Palette:
    """Concrete SGR sequences used by the renderer."""

    border: str
    highlight: str
    highlight_bold: str
    dim: str
    reset: str


PLAIN_PALETTE = Palette(border="", highlight="", highlight_bold="", dim="", reset="")


def is_hex_color(value: object) -> bool:
    """Return whether ``value`` is a ``#RRGGBB`` string."""
    return isinstance(value, str) and HEX_COLOR_RE.match(value) is not None


def theme_index(theme: Theme) -> int:
    """Registry position of ``theme``'s border color, or ``0`` when unknown."""
    wanted = theme.border_color.upper()
    for idx, candidate in enumerate(THEMES):
        if candidate.border_color == wanted:
            return idx
    return 0


def next_theme(theme: Theme) -> Theme:
    """Return the registry theme after ``theme``, wrapping at the end."""
    return THEMES[(theme_index(theme) + 1) % len(THEMES)]


def _foreground_sgr(color: str, bold: bool = False) -> str:
    red = int(color[1:3], 16)
    green = int(color[3:5], 16)
    blue = int(color[5:7], 16)
    prefix = "1;" if bold else ""
    return f"\033[{prefix}38;2;{red};{green};{blue}m"


def resolve_palette(theme: Theme, *, no_color: bool = False) -> Palette:
    """Return ANSI palette for ``theme``, or a plain one when color is unusable."""
    if no_color:
        return PLAIN_PALETTE
    if not is_hex_color(theme.border_color) or not is_hex_color(theme.highlight_color):
        return PLAIN_PALETTE
    return Palette(
        border=_foreground_sgr(theme.border_color),
        highlight=_foreground_sgr(theme.highlight_color),
        highlight_bold=_foreground_sgr(theme.highlight_color, bold=True),
        dim="\033[38;2;136;136;136m",
        reset=RESET,
    )


__all__ = [
    "Theme",
    "Palette",
    "THEMES",
    "DEFAULT_THEME",
    "PLAIN_PALETTE",
    "is_hex_color",
    "theme_index",
    "next_theme",
    "resolve_palette",
]
