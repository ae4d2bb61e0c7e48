"""Browser bootstrap and key dispatch.

Builds the initial navigation state and history store from config, wires the
navigator to the event loop, and exposes ``run_browser`` for the CLI.
"""

from __future__ import annotations

import shutil
import sys
from collections.abc import Callable
from pathlib import Path

from ..config import AppConfig
from ..history import HistoryStore
from ..input import read_key
from ..keys import command_for_key
from ..logging_config import get_logger
from ..navigation import NavigationState, Navigator
from ..render import write_frame
from ..ui_theme import UITheme
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = get_logger("app")


def prepare_history(config: AppConfig) -> HistoryStore:
    """Create the data directory and history file on first run, then load."""
    try:
        config.data_directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Cannot create data directory %s: %s", config.data_directory, exc)
    HistoryStore.initialize(config.history_path)
    return HistoryStore.load(config.history_path, media_root=config.default_directory)


def build_navigator(
    config: AppConfig,
    history: HistoryStore,
    start_path: Path | None = None,
    **navigator_kwargs,
) -> Navigator:
    """Create a refreshed navigator rooted at ``start_path`` (or the config default)."""
    initial = (start_path or config.default_directory).expanduser()
    try:
        initial = initial.resolve()
    except (OSError, RuntimeError):
        initial = initial.absolute()
    state = NavigationState(current_path=initial)
    navigator = Navigator(state, config, history, **navigator_kwargs)
    navigator.refresh()
    return navigator


def _terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


class App:
    """Composed runtime app owning the navigator and loop wiring."""

    def __init__(
        self,
        *,
        navigator: Navigator,
        terminal: TerminalController,
        stdin_fd: int,
        stdout_fd: int,
        theme: UITheme,
        timing: RuntimeLoopTiming | None = None,
        run_main_loop_fn: Callable[..., None] = run_main_loop,
    ) -> None:
        self.navigator = navigator
        self.terminal = terminal
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.theme = theme
        self.timing = timing or RuntimeLoopTiming()
        self._run_main_loop = run_main_loop_fn

    @property
    def state(self) -> NavigationState:
        return self.navigator.state

    def draw(self, state: NavigationState, size: tuple[int, int]) -> None:
        write_frame(self.stdout_fd, state, size, self.theme)

    def handle_key(self, key: str) -> bool:
        """Translate one key into a command and apply it. Returns ``True`` to quit."""
        command = command_for_key(key, self.state)
        if command is None:
            return False
        logger.debug("Key %r -> %s", key, command.name)
        return self.navigator.apply(command)

    def run(self) -> None:
        """Run the interactive event loop."""
        self._run_main_loop(
            state=self.state,
            terminal=self.terminal,
            stdin_fd=self.stdin_fd,
            timing=self.timing,
            callbacks=RuntimeLoopCallbacks(
                terminal_size=_terminal_size,
                read_key=read_key,
                draw=self.draw,
                handle_key=self.handle_key,
            ),
        )


def run_browser(config: AppConfig, start_path: Path | None, theme: UITheme) -> None:
    """Bootstrap state from ``config`` and run the browser until quit."""
    history = prepare_history(config)
    navigator = build_navigator(config, history, start_path)
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    app = App(
        navigator=navigator,
        terminal=TerminalController(stdin_fd, stdout_fd),
        stdin_fd=stdin_fd,
        stdout_fd=stdout_fd,
        theme=theme,
    )
    logger.info("Starting browser at %s", navigator.state.current_path)
    app.run()
    logger.info("Browser exited")


__all__ = [
    "App",
    "build_navigator",
    "prepare_history",
    "run_browser",
]
