"""Key-token to command mapping for the browser."""

from __future__ import annotations

from .navigation import Command, NavigationState

OPEN_KEYS = frozenset({"l", "RIGHT", "ENTER"})

KEY_COMMANDS: dict[str, Command] = {
    "k": Command.MOVE_UP,
    "UP": Command.MOVE_UP,
    "j": Command.MOVE_DOWN,
    "DOWN": Command.MOVE_DOWN,
    "h": Command.LEAVE,
    "LEFT": Command.LEAVE,
    "BACKSPACE": Command.LEAVE,
    "w": Command.TOGGLE_WATCHED,
    ".": Command.TOGGLE_HIDDEN,
    "?": Command.TOGGLE_HELP,
    "q": Command.QUIT,
    "CTRL_C": Command.QUIT,
}


def command_for_key(key: str, state: NavigationState) -> Command | None:
    """Return the command bound to ``key``, or ``None`` when unbound.

    Open keys resolve against the current selection: directories are
    entered, files are played.
    """
    if key in OPEN_KEYS:
        entry = state.selected_entry
        if entry is None:
            return None
        return Command.ACTIVATE if entry.is_file else Command.ENTER
    return KEY_COMMANDS.get(key)


__all__ = [
    "KEY_COMMANDS",
    "OPEN_KEYS",
    "command_for_key",
]
