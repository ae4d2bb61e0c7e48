"""Tests for frame layout, text fitting, and ANSI painting.

Frames are checked through ``render_text`` so assertions read like the
screen a user would see.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from lazywatch.listing import Entry
from lazywatch.navigation import NavigationState
from lazywatch.render import DrawOp, effective_size, paint, render_frame, render_text, scroll_offset, title_text
from lazywatch.render.help import help_lines, help_panel_box
from lazywatch.render.text import clip_to_width, display_width, truncate_with_ellipsis
from lazywatch.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _file(name: str, display: str | None = None, watched: bool = False) -> Entry:
    return Entry(Path("/media") / name, name, display or name, is_file=True, is_watched=watched)


def _dir(name: str) -> Entry:
    return Entry(Path("/media") / name, name, name, is_file=False)


def _state(entries: list[Entry], selected: int = 0, **kwargs) -> NavigationState:
    return NavigationState(current_path=Path("/media"), selected_index=selected, entries=entries, **kwargs)


class TextFittingTests(unittest.TestCase):
    def test_truncate_adds_ellipsis_only_when_cut(self) -> None:
        self.assertEqual(truncate_with_ellipsis("hello", 5), "hello")
        self.assertEqual(truncate_with_ellipsis("hello", 3), "he…")
        self.assertEqual(truncate_with_ellipsis("hello", 1), "…")
        self.assertEqual(truncate_with_ellipsis("hello", 0), "")

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(clip_to_width("日本語", 5), "日本")
        self.assertEqual(display_width(truncate_with_ellipsis("日本語テスト", 6)), 5)


class LayoutHelperTests(unittest.TestCase):
    def test_effective_size_clamps_to_bounds(self) -> None:
        self.assertEqual(effective_size(1000, 100), (400, 20))
        self.assertEqual(effective_size(-5, -1), (0, 0))
        self.assertEqual(effective_size(80, 12), (80, 12))

    def test_scroll_offset_pins_selection_to_last_visible_row(self) -> None:
        self.assertEqual(scroll_offset(0, 4), 0)
        self.assertEqual(scroll_offset(3, 4), 0)
        self.assertEqual(scroll_offset(7, 4), 4)
        self.assertEqual(scroll_offset(5, 0), 0)

    def test_title_has_trailing_separator_except_root(self) -> None:
        self.assertEqual(title_text(Path("/media")), "/media/")
        self.assertEqual(title_text(Path("/")), "/")


class RenderFrameTests(unittest.TestCase):
    def test_basic_frame(self) -> None:
        rows = render_text(_state([_dir("Movies"), _file("a.mkv", "a")]), (20, 6))

        self.assertEqual(
            rows,
            [
                "┌─/media/──────────┐",
                "│ > Movies/        │",
                "│   a              │",
                "│                  │",
                "│                  │",
                "└──────────────────┘",
            ],
        )

    def test_rows_never_exceed_clamped_size(self) -> None:
        entries = [_file(f"e{i:02d}.mkv", f"e{i:02d}") for i in range(40)]
        rows = render_text(_state(entries), (500, 60))
        self.assertEqual(len(rows), 20)
        self.assertTrue(all(display_width(row) <= 400 for row in rows))

    def test_selected_entry_stays_visible_when_scrolled(self) -> None:
        entries = [_file(f"e{i:02d}.mkv", f"e{i:02d}") for i in range(10)]
        rows = render_text(_state(entries, selected=7), (20, 6))

        self.assertEqual(rows[1], "│   e04            │")
        self.assertEqual(rows[4], "│ > e07            │")
        self.assertFalse(any("e03" in row for row in rows))

    def test_long_names_are_truncated_with_ellipsis(self) -> None:
        rows = render_text(_state([_file("abcdefghijklmnop.mkv", "abcdefghijklmnop")]), (12, 4))
        self.assertEqual(rows[1], "│ > abcdef…│")

    def test_long_title_is_truncated(self) -> None:
        state = NavigationState(current_path=Path("/very/long/media/path"))
        rows = render_text(state, (12, 3))
        self.assertEqual(rows[0], "┌─/very/l…─┐")

    def test_roles_distinguish_directories_and_watched_state(self) -> None:
        entries = [_dir("Shows"), _file("a.mkv", "a", watched=True), _file("b.mkv", "b")]
        ops = render_frame(_state(entries), (30, 8))
        roles = {op.text: op.role for op in ops if op.x == 4}
        self.assertEqual(roles, {"Shows/": "directory", "a": "watched", "b": "unwatched"})

    def test_help_panel_stays_inside_frame(self) -> None:
        entries = [_file("a-very-long-movie-name-that-would-reach-the-panel.mkv")]
        ops = render_frame(_state(entries, show_help=True), (60, 20))

        x1, y1, x2, y2 = help_panel_box(60, 20)
        help_ops = [op for op in ops if op.role.startswith("help_")]
        self.assertTrue(help_ops)
        for op in help_ops:
            self.assertGreaterEqual(op.x, x1)
            self.assertLessEqual(op.x + display_width(op.text) - 1, x2)
            self.assertGreaterEqual(op.y, y1)
            self.assertLessEqual(op.y, y2)
            self.assertGreaterEqual(op.x, 1)
            self.assertLessEqual(op.x + display_width(op.text) - 1, 58)
            self.assertLessEqual(op.y, 18)

        name_op = next(op for op in ops if op.role == "unwatched")
        self.assertLessEqual(name_op.x + display_width(name_op.text), x1)

        rows = render_text(_state(entries, show_help=True), (60, 20))
        self.assertIn(help_lines()[0], rows[y1 + 1])

    def test_status_message_on_bottom_border(self) -> None:
        rows = render_text(_state([], status_message="Playing a"), (30, 4))
        self.assertTrue(rows[3].startswith("└─ Playing a ─"))
        self.assertTrue(rows[3].endswith("┘"))

    def test_degenerate_sizes_do_not_fail(self) -> None:
        state = _state([_dir("Movies"), _file("a.mkv", "a")], show_help=True, status_message="x")
        self.assertEqual(render_frame(state, (0, 0)), [])
        self.assertEqual(render_frame(state, (-3, 10)), [])
        for size in ((1, 1), (2, 2), (3, 3), (5, 2), (4, 20)):
            rows = render_text(state, size)
            width, height = effective_size(*size)
            self.assertEqual(len(rows), height)
            self.assertTrue(all(display_width(row) <= width for row in rows))

    def test_render_is_pure(self) -> None:
        state = _state([_dir("Movies"), _file("a.mkv", "a")], selected=1)
        self.assertEqual(render_frame(state, (40, 10)), render_frame(state, (40, 10)))
        self.assertEqual(state.selected_index, 1)


class PaintTests(unittest.TestCase):
    def test_paint_clears_then_positions_and_styles(self) -> None:
        out = paint([DrawOp(0, 0, "ab", "border")], DEFAULT_THEME)
        self.assertTrue(out.startswith("\033[H\033[2J"))
        self.assertIn("\033[1;1H" + DEFAULT_THEME.border + "ab" + DEFAULT_THEME.reset, out)

    def test_plain_theme_emits_no_styles(self) -> None:
        out = paint([DrawOp(3, 2, "x", "title")], PLAIN_THEME)
        self.assertEqual(out, "\033[H\033[2J\033[3;4Hx")

    def test_negative_coordinates_and_empty_text_are_skipped(self) -> None:
        out = paint([DrawOp(-1, 0, "a"), DrawOp(0, -1, "b"), DrawOp(0, 0, "")], PLAIN_THEME)
        self.assertEqual(out, "\033[H\033[2J")


if __name__ == "__main__":
    unittest.main()
