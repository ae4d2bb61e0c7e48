"""Main interactive event loop for the terminal UI.

Each iteration repaints the full frame, then waits up to the poll timeout for
one key. A timeout without input simply repaints. Feature logic lives in the
injected callbacks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..navigation import NavigationState
from .terminal import exit_on_signals

POLL_TIMEOUT_MS = 1000


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int = POLL_TIMEOUT_MS


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    terminal_size: Callable[[], tuple[int, int]]
    read_key: Callable[[int, int | None], str]
    draw: Callable[[NavigationState, tuple[int, int]], None]
    handle_key: Callable[[str], bool]


def run_main_loop(
    state: NavigationState,
    terminal,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until ``handle_key`` reports a quit.

    The terminal is restored on every exit path, including exceptions and
    termination signals.
    """
    with exit_on_signals(), terminal.raw_mode():
        while True:
            callbacks.draw(state, callbacks.terminal_size())
            key = callbacks.read_key(stdin_fd, timing.poll_timeout_ms)
            if not key:
                continue
            if callbacks.handle_key(key):
                return


__all__ = [
    "POLL_TIMEOUT_MS",
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "run_main_loop",
]
