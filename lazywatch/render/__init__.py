"""Rendering engine for the single-pane browser view.

Builds draw ops from navigation state and writes fully composed ANSI frames.
Nothing here mutates runtime state.
"""

from __future__ import annotations

import os

from ..navigation import NavigationState
from ..ui_theme import UITheme
from .frame import DrawOp, effective_size, render_frame, scroll_offset, title_text
from .screen import compose_text, paint


def write_frame(fd: int, state: NavigationState, size: tuple[int, int], theme: UITheme) -> None:
    """Render and write one full frame for ``state`` to ``fd``."""
    payload = paint(render_frame(state, size), theme)
    os.write(fd, payload.encode("utf-8", errors="replace"))


def render_text(state: NavigationState, size: tuple[int, int]) -> list[str]:
    """Render one frame as plain text rows at the effective size."""
    return compose_text(render_frame(state, size), effective_size(*size))


__all__ = [
    "DrawOp",
    "compose_text",
    "effective_size",
    "paint",
    "render_frame",
    "render_text",
    "scroll_offset",
    "title_text",
    "write_frame",
]
