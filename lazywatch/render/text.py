"""Display-width measurement and clipping for plain cell text.

Combining marks take no columns and East Asian wide/fullwidth characters take
two, so names line up with the terminal grid.
"""

from __future__ import annotations

import unicodedata

ELLIPSIS = "…"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def truncate_with_ellipsis(text: str, max_cols: int, ellipsis: str = ELLIPSIS) -> str:
    """Fit ``text`` into ``max_cols`` columns, ending in ``ellipsis`` when cut."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    ellipsis_width = display_width(ellipsis)
    if max_cols <= ellipsis_width:
        return clip_to_width(ellipsis, max_cols)
    return clip_to_width(text, max_cols - ellipsis_width) + ellipsis


__all__ = [
    "ELLIPSIS",
    "char_display_width",
    "clip_to_width",
    "display_width",
    "truncate_with_ellipsis",
]
