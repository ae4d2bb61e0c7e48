"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching. Restoration runs on
every exit path of ``raw_mode``, including exceptions and termination signals
converted to ``SystemExit``.
"""

from __future__ import annotations

import contextlib
import os
import signal
import sys
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"
EXIT_SIGNALS = tuple(sig for sig in (getattr(signal, "SIGTERM", None), getattr(signal, "SIGHUP", None)) if sig)


class TerminalController:
    """Manage terminal mode transitions for one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen, and restore tty settings."""
        try:
            os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


def _exit_now(signum: int, _frame: object) -> None:
    raise SystemExit(128 + signum)


@contextlib.contextmanager
def exit_on_signals(signals: tuple[int, ...] = EXIT_SIGNALS):
    """Turn termination signals into ``SystemExit`` so cleanup can run."""
    previous: dict[int, object] = {}
    for sig in signals:
        try:
            previous[sig] = signal.signal(sig, _exit_now)
        except (OSError, ValueError):
            continue
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def stdio_is_tty() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


__all__ = [
    "ENTER_TUI_SEQUENCE",
    "EXIT_SIGNALS",
    "LEAVE_TUI_SEQUENCE",
    "TerminalController",
    "exit_on_signals",
    "stdio_is_tty",
]
