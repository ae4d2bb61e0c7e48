"""Browser navigation state and the command state machine.

``NavigationState`` is the only mutable object in the program. ``Navigator``
applies commands to it and re-lists the current directory after each one, so
state can be driven and inspected without a terminal.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .config import AppConfig
from .history import HistoryStore
from .listing import DirectoryListing, Entry, list_entries
from .logging_config import get_logger
from .player import launch_player

logger = get_logger("navigation")


class Command(enum.Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER = "enter"
    LEAVE = "leave"
    ACTIVATE = "activate"
    TOGGLE_WATCHED = "toggle_watched"
    TOGGLE_HIDDEN = "toggle_hidden"
    TOGGLE_HELP = "toggle_help"
    QUIT = "quit"


@dataclass
class NavigationState:
    current_path: Path
    selected_index: int = 0
    entries: list[Entry] = field(default_factory=list)
    show_hidden: bool = False
    show_help: bool = False
    status_message: str = ""

    @property
    def selected_entry(self) -> Entry | None:
        if 0 <= self.selected_index < len(self.entries):
            return self.entries[self.selected_index]
        return None


def clamp_selection(index: int, count: int) -> int:
    """Wrap ``index`` into ``[0, count)``; ``0`` for an empty list."""
    if count <= 0:
        return 0
    return index % count


def parent_path(path: Path) -> Path:
    """Return the parent directory; the filesystem root is its own parent."""
    return path.parent


ListEntries = Callable[..., DirectoryListing]
LaunchPlayer = Callable[[str, Path, Path], str | None]


class Navigator:
    """Apply ``Command`` values to a ``NavigationState``.

    Collaborators are injected so tests can substitute the lister and the
    player launcher.
    """

    def __init__(
        self,
        state: NavigationState,
        config: AppConfig,
        history: HistoryStore,
        *,
        list_entries_fn: ListEntries = list_entries,
        launch_player_fn: LaunchPlayer = launch_player,
    ) -> None:
        self.state = state
        self.config = config
        self.history = history
        self._list_entries = list_entries_fn
        self._launch_player = launch_player_fn

    @property
    def filters(self) -> Sequence[str]:
        return self.config.file_type_filters

    def _listing(self, directory: Path) -> DirectoryListing:
        return self._list_entries(
            directory,
            show_hidden=self.state.show_hidden,
            filters=self.filters,
            is_watched=self.history.contains,
        )

    def refresh(self) -> None:
        """Re-list ``current_path`` and re-clamp the selection.

        A failed listing clears the entry list instead of keeping stale rows.
        """
        listing = self._listing(self.state.current_path)
        self.state.entries = list(listing.entries)
        self.state.selected_index = clamp_selection(self.state.selected_index, len(self.state.entries))

    def apply(self, command: Command) -> bool:
        """Apply one command, then refresh. Returns ``True`` to quit."""
        if command is Command.QUIT:
            return True

        self.state.status_message = ""
        handler = self._handlers()[command]
        handler()
        self.refresh()
        return False

    def _handlers(self) -> dict[Command, Callable[[], None]]:
        return {
            Command.MOVE_UP: lambda: self.move_selection(-1),
            Command.MOVE_DOWN: lambda: self.move_selection(1),
            Command.ENTER: self.enter_selected,
            Command.LEAVE: self.leave,
            Command.ACTIVATE: self.activate_selected,
            Command.TOGGLE_WATCHED: self.toggle_watched,
            Command.TOGGLE_HIDDEN: self.toggle_hidden,
            Command.TOGGLE_HELP: self.toggle_help,
        }

    def move_selection(self, delta: int) -> None:
        self.state.selected_index += delta

    def enter_selected(self) -> None:
        entry = self.state.selected_entry
        if entry is None or entry.is_file:
            return
        listing = self._listing(entry.path)
        if not listing.ok:
            reason = listing.error.strerror if listing.error is not None else None
            self.state.status_message = f"Cannot open {entry.name}: {reason or 'unreadable'}"
            return
        self.state.current_path = entry.path
        self.state.selected_index = 0

    def leave(self) -> None:
        self.state.current_path = parent_path(self.state.current_path)
        self.state.selected_index = 0

    def activate_selected(self) -> None:
        entry = self.state.selected_entry
        if entry is None or not entry.is_file:
            return
        error = self._launch_player(self.config.player_command, entry.path, self.config.data_directory)
        if error is not None:
            self.state.status_message = error
            return
        self.history.add(entry.path)
        self.state.status_message = f"Playing {entry.display_name}"

    def toggle_watched(self) -> None:
        entry = self.state.selected_entry
        if entry is None or not entry.is_file:
            return
        watched = self.history.toggle(entry.path)
        logger.debug("Marked %s as %s", entry.path, "watched" if watched else "unwatched")

    def toggle_hidden(self) -> None:
        self.state.show_hidden = not self.state.show_hidden

    def toggle_help(self) -> None:
        self.state.show_help = not self.state.show_help


__all__ = [
    "Command",
    "NavigationState",
    "Navigator",
    "clamp_selection",
    "parent_path",
]
