"""External player launch helper.

Starts the configured player in its own session and returns immediately.
Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from .logging_config import get_logger

STDOUT_LOG_NAME = "out.log"
STDERR_LOG_NAME = "err.log"

logger = get_logger("player")


def build_player_argv(command: str, target: Path) -> list[str]:
    """Return ``[*shlex.split(command), str(target)]``."""
    return [*shlex.split(command), str(target)]


def launch_player(command: str, target: Path, log_dir: Path) -> str | None:
    """Spawn ``command target`` without waiting for it.

    Child stdout/stderr are truncated into ``out.log``/``err.log`` under
    ``log_dir``. The child is never joined; its lifetime is independent of
    the browser.
    """
    try:
        argv = build_player_argv(command, target)
    except ValueError as exc:
        return f"Cannot play: invalid player command ({exc})."
    if len(argv) < 2:
        return "Cannot play: player command is empty."

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        out_log = open(log_dir / STDOUT_LOG_NAME, "wb")
        try:
            err_log = open(log_dir / STDERR_LOG_NAME, "wb")
        except OSError:
            out_log.close()
            raise
    except OSError as exc:
        logger.error("Cannot open player logs in %s: %s", log_dir, exc)
        return f"Cannot play: log directory not writable ({exc.strerror or exc})."

    try:
        with out_log, err_log:
            process = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=out_log,
                stderr=err_log,
                start_new_session=True,
                close_fds=True,
            )
    except FileNotFoundError:
        logger.error("Player not found: %s", argv[0])
        return f"Failed to launch player: {argv[0]} not found."
    except PermissionError:
        logger.error("Player not executable: %s", argv[0])
        return f"Failed to launch player: {argv[0]} is not executable."
    except OSError as exc:
        logger.error("Failed to launch player %s: %s", argv, exc)
        return f"Failed to launch player: {exc}"

    logger.info("Launched player pid=%s for %s", process.pid, target)
    return None


__all__ = [
    "STDERR_LOG_NAME",
    "STDOUT_LOG_NAME",
    "build_player_argv",
    "launch_player",
]
