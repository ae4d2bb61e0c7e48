"""Help panel content and geometry.

Keybinding rows are fixed-width aligned plain text; the painter styles them.
Helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from .text import display_width

HELP_TITLE = "KEYS"
HELP_KEY_COLUMN_WIDTH = 10

HELP_BINDINGS: tuple[tuple[str, str], ...] = (
    ("k/Up", "move up"),
    ("j/Down", "move down"),
    ("l/Enter", "open dir / play"),
    ("h/Left", "parent dir"),
    ("w", "toggle watched"),
    (".", "show hidden"),
    ("?", "toggle help"),
    ("q", "quit"),
)


def help_lines() -> tuple[str, ...]:
    """Return the title row followed by aligned ``key  description`` rows."""
    rows = [HELP_TITLE]
    rows.extend(f"{key:<{HELP_KEY_COLUMN_WIDTH}}{description}" for key, description in HELP_BINDINGS)
    return tuple(rows)


def help_panel_box(columns: int, rows: int) -> tuple[int, int, int, int] | None:
    """Return ``(x1, y1, x2, y2)`` for the help panel inside the outer frame.

    The panel hugs the top-right corner and is clipped to the frame interior.
    ``None`` when the frame is too small to hold a bordered panel.
    """
    lines = help_lines()
    panel_width = max(display_width(line) for line in lines) + 4
    panel_height = len(lines) + 2

    x2 = columns - 2
    y1 = 1
    x1 = max(1, x2 - panel_width + 1)
    y2 = min(rows - 2, y1 + panel_height - 1)
    if x2 - x1 < 2 or y2 - y1 < 1:
        return None
    return x1, y1, x2, y2


def help_panel_width(columns: int, rows: int) -> int:
    """Return the columns the open help panel occupies, ``0`` if not drawn."""
    box = help_panel_box(columns, rows)
    if box is None:
        return 0
    x1, _y1, x2, _y2 = box
    return x2 - x1 + 1


__all__ = [
    "HELP_BINDINGS",
    "HELP_TITLE",
    "help_lines",
    "help_panel_box",
    "help_panel_width",
]
