"""Command-line front door for lazywatch.

Parses CLI options, loads config, resolves the starting directory, and then
dispatches into the interactive browser runtime (or prints one frame with
``--render``).
"""

from __future__ import annotations

import argparse
import shutil
import sys
from dataclasses import replace
from pathlib import Path

from .config import load_config
from .history import HistoryStore
from .logging_config import VALID_LEVELS, get_logger, setup_logging
from .render import render_text
from .runtime.app import build_navigator, run_browser
from .runtime.terminal import stdio_is_tty
from .ui_theme import available_theme_names, resolve_theme

logger = get_logger("cli")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a media directory tree and launch a player, tracking watched files."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to start in. Defaults to the configured default_directory.",
    )
    parser.add_argument("--config", metavar="FILE", default=None, help="Path to the JSON config file.")
    parser.add_argument("--player", metavar="CMD", default=None, help="Override the configured player command.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=VALID_LEVELS,
        help="Log level for the log file in the data directory.",
    )
    parser.add_argument("--render", action="store_true", help="Print one frame as plain text and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument(
        "--rows",
        type=_positive_int,
        default=None,
        help="Row count for --render output (default: terminal height).",
    )
    return parser


def _render_size(max_cols: int | None, rows: int | None) -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return (max_cols or term.columns, rows or term.lines)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    """
    args = build_parser().parse_args(argv)

    config = load_config(Path(args.config).expanduser() if args.config else None)
    if args.player:
        config = replace(config, player_command=args.player)

    start_path = Path(args.path).expanduser() if args.path else config.default_directory
    if not start_path.exists():
        raise SystemExit(f"Path not found: {start_path}")
    if not start_path.is_dir():
        raise SystemExit(f"Not a directory: {start_path}")

    if args.render:
        history = HistoryStore.load(config.history_path, media_root=config.default_directory)
        navigator = build_navigator(config, history, start_path)
        rows = render_text(navigator.state, _render_size(args.max_cols, args.rows))
        sys.stdout.write("\n".join(rows) + "\n")
        return

    if not stdio_is_tty():
        raise SystemExit("lazywatch needs an interactive terminal (use --render for plain output).")

    setup_logging(args.log_level, config.log_path)
    logger.info("Using player %r, data directory %s", config.player_command, config.data_directory)
    run_browser(config, start_path, resolve_theme(args.theme, no_color=args.no_color))


if __name__ == "__main__":
    main()
