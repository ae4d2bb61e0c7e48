"""Frame layout: turn navigation state into absolute-position draw ops.

``render_frame`` is a pure function of state and terminal size. It keeps no
memory between frames; the scroll offset is recomputed from the selection
every call, so the same state always yields the same frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..navigation import NavigationState
from .help import help_lines, help_panel_box, help_panel_width
from .text import clip_to_width, truncate_with_ellipsis

MIN_SIZE = (0, 0)
MAX_SIZE = (400, 20)

BORDER_TL = "┌"
BORDER_TR = "┐"
BORDER_BL = "└"
BORDER_BR = "┘"
BORDER_H = "─"
BORDER_V = "│"

SELECTION_MARKER = ">"
MARKER_COLUMN = 2
NAME_COLUMN = 4


@dataclass(frozen=True)
class DrawOp:
    """Text placed at an absolute cell; negative coordinates are never drawn."""

    x: int
    y: int
    text: str
    role: str = ""


def effective_size(columns: int, rows: int) -> tuple[int, int]:
    """Clamp terminal size component-wise into ``[MIN_SIZE, MAX_SIZE]``."""
    width = max(MIN_SIZE[0], min(MAX_SIZE[0], columns))
    height = max(MIN_SIZE[1], min(MAX_SIZE[1], rows))
    return width, height


def scroll_offset(selected_index: int, visible_rows: int) -> int:
    """First entry index shown so the selection stays inside the band.

    When the selection would fall below the band it is pinned to the last
    visible row.
    """
    if visible_rows <= 0:
        return 0
    return max(0, selected_index - visible_rows + 1)


def title_text(path: Path) -> str:
    """Current path with a trailing separator unless it is the root."""
    text = str(path)
    if path.parent == path or text.endswith("/"):
        return text
    return text + "/"


def entry_label(display_name: str, is_file: bool) -> str:
    return display_name if is_file else display_name + "/"


def box_ops(x1: int, y1: int, x2: int, y2: int, role: str, *, fill: bool = False) -> list[DrawOp]:
    """Border ops for the rectangle ``(x1, y1)..(x2, y2)`` inclusive."""
    if x2 <= x1 or y2 <= y1:
        return []
    inner = x2 - x1 - 1
    ops = [DrawOp(x1, y1, BORDER_TL + BORDER_H * inner + BORDER_TR, role)]
    for y in range(y1 + 1, y2):
        if fill:
            ops.append(DrawOp(x1, y, BORDER_V + " " * inner + BORDER_V, role))
        else:
            ops.append(DrawOp(x1, y, BORDER_V, role))
            ops.append(DrawOp(x2, y, BORDER_V, role))
    ops.append(DrawOp(x1, y2, BORDER_BL + BORDER_H * inner + BORDER_BR, role))
    return ops


def _entry_ops(state: NavigationState, width: int, height: int, reserved_right: int) -> list[DrawOp]:
    visible_rows = max(0, height - 2)
    name_budget = width - (NAME_COLUMN + 1) - reserved_right
    offset = scroll_offset(state.selected_index, visible_rows)
    ops: list[DrawOp] = []
    for idx in range(offset, min(len(state.entries), offset + visible_rows)):
        entry = state.entries[idx]
        y = 1 + idx - offset
        if idx == state.selected_index and MARKER_COLUMN < width - 1:
            ops.append(DrawOp(MARKER_COLUMN, y, SELECTION_MARKER, "marker"))
        if name_budget <= 0:
            continue
        if not entry.is_file:
            role = "directory"
        elif entry.is_watched:
            role = "watched"
        else:
            role = "unwatched"
        label = truncate_with_ellipsis(entry_label(entry.display_name, entry.is_file), name_budget)
        ops.append(DrawOp(NAME_COLUMN, y, label, role))
    return ops


def _help_ops(width: int, height: int) -> list[DrawOp]:
    box = help_panel_box(width, height)
    if box is None:
        return []
    x1, y1, x2, y2 = box
    ops = box_ops(x1, y1, x2, y2, "help_border", fill=True)
    text_width = x2 - x1 - 3
    for row, line in enumerate(help_lines()):
        y = y1 + 1 + row
        if y >= y2:
            break
        clipped = clip_to_width(line, text_width)
        if clipped:
            ops.append(DrawOp(x1 + 2, y, clipped, "help_text"))
    return ops


def render_frame(state: NavigationState, size: tuple[int, int]) -> list[DrawOp]:
    """Build every draw op for one full-screen frame.

    ``size`` is the raw terminal ``(columns, rows)``; it is clamped first.
    Degenerate sizes produce fewer ops, never errors.
    """
    width, height = effective_size(*size)
    if width <= 0 or height <= 0:
        return []

    ops = box_ops(0, 0, width - 1, height - 1, "border")

    title_budget = width - 4
    if title_budget > 0:
        ops.append(DrawOp(2, 0, truncate_with_ellipsis(title_text(state.current_path), title_budget), "title"))

    reserved_right = help_panel_width(width, height) if state.show_help else 0

    ops.extend(_entry_ops(state, width, height, reserved_right))

    if state.show_help:
        ops.extend(_help_ops(width, height))

    if state.status_message and height >= 2 and title_budget > 2:
        message = truncate_with_ellipsis(state.status_message, title_budget - 2)
        ops.append(DrawOp(2, height - 1, f" {message} ", "status"))
    return ops


__all__ = [
    "BORDER_BL",
    "BORDER_BR",
    "BORDER_H",
    "BORDER_TL",
    "BORDER_TR",
    "BORDER_V",
    "DrawOp",
    "MAX_SIZE",
    "MIN_SIZE",
    "box_ops",
    "effective_size",
    "entry_label",
    "render_frame",
    "scroll_offset",
    "title_text",
]
