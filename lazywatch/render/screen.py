"""Draw-op output: ANSI painting for the terminal and plain-text composing.

``paint`` produces one full-screen write (clear + repaint, no diffing).
``compose_text`` lays ops onto a character grid for ``--render`` and tests.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..ui_theme import UITheme
from .frame import DrawOp
from .text import char_display_width

CLEAR_SCREEN = "\033[H\033[2J"


def paint(ops: Iterable[DrawOp], theme: UITheme) -> str:
    """Return the escape-sequence string that draws ``ops`` on a cleared screen."""
    out: list[str] = [CLEAR_SCREEN]
    for op in ops:
        if op.x < 0 or op.y < 0 or not op.text:
            continue
        out.append(f"\033[{op.y + 1};{op.x + 1}H")
        style = theme.style_for(op.role)
        if style:
            out.append(style)
            out.append(op.text)
            out.append(theme.reset)
        else:
            out.append(op.text)
    return "".join(out)


def compose_text(ops: Iterable[DrawOp], size: tuple[int, int]) -> list[str]:
    """Lay ``ops`` onto a ``size`` grid and return right-stripped rows.

    Later ops overwrite earlier ones. Cells outside the grid are dropped.
    """
    width, height = size
    if width <= 0 or height <= 0:
        return []
    grid = [[" "] * width for _ in range(height)]
    for op in ops:
        if op.x < 0 or op.y < 0 or op.y >= height:
            continue
        row = grid[op.y]
        col = op.x
        for ch in op.text:
            w = char_display_width(ch)
            if w == 0:
                if 0 < col <= width:
                    row[col - 1] += ch
                continue
            if col + w > width:
                break
            row[col] = ch
            if w == 2:
                row[col + 1] = ""
            col += w
    return ["".join(row).rstrip() for row in grid]


__all__ = [
    "CLEAR_SCREEN",
    "compose_text",
    "paint",
]
