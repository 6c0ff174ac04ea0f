"""Column arithmetic for styled panel rows.

SGR escape sequences occupy no columns and wide CJK glyphs occupy two, so
rows can be padded and clipped to exact terminal cells.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_ZERO_WIDTH_CATEGORIES = frozenset({"Cc", "Cf", "Mn", "Me"})


def cell_width(ch: str) -> int:
    if unicodedata.category(ch) in _ZERO_WIDTH_CATEGORIES:
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def _segments(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_escape, chunk)`` pieces of ``text`` in order."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        if match.start() > pos:
            yield False, text[pos : match.start()]
        yield True, match.group(0)
        pos = match.end()
    if pos < len(text):
        yield False, text[pos:]


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    return sum(cell_width(ch) for is_escape, chunk in _segments(text) if not is_escape for ch in chunk)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` to at most ``max_cols`` columns.

    Escape sequences after the cut are still emitted so a trailing reset
    survives and styling does not leak into the next cell.
    """
    if max_cols <= 0:
        return ""
    out: list[str] = []
    used = 0
    full = False
    for is_escape, chunk in _segments(text):
        if is_escape:
            out.append(chunk)
            continue
        if full:
            continue
        for ch in chunk:
            width = cell_width(ch)
            if used + width > max_cols:
                full = True
                break
            out.append(ch)
            used += width
    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip or right-pad ``text`` to exactly ``width`` columns."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


__all__ = [
    "ANSI_ESCAPE_RE",
    "cell_width",
    "display_width",
    "clip_ansi_line",
    "fit_ansi_line",
]
