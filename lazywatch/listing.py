"""Directory scanning into sorted, filtered browser entries."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .logging_config import get_logger

SYSTEM_NAMES = frozenset({"System Volume Information"})

logger = get_logger("listing")


@dataclass(frozen=True)
class Entry:
    """One visible directory child.

    ``display_name`` is derived for rendering only; ``path`` is what gets
    opened and what the history store keys on.
    """

    path: Path
    name: str
    display_name: str
    is_file: bool
    is_watched: bool = False

    @property
    def is_dir(self) -> bool:
        return not self.is_file


@dataclass(frozen=True)
class DirectoryListing:
    """Scan result; ``error`` is set when the directory could not be read."""

    entries: tuple[Entry, ...] = ()
    error: OSError | None = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` is a dotfile or a reserved system entry."""
    return name.startswith(".") or name in SYSTEM_NAMES


def matches_filters(name: str, filters: Sequence[str]) -> bool:
    """Case-sensitive exact suffix match against the filter list."""
    return any(name.endswith(suffix) for suffix in filters if suffix)


def strip_filter_suffixes(name: str, filters: Sequence[str]) -> str:
    """Remove every occurrence of each filter suffix from a display name."""
    display = name
    for suffix in filters:
        if suffix:
            display = display.replace(suffix, "")
    return display


def list_entries(
    directory: Path,
    *,
    show_hidden: bool,
    filters: Sequence[str] = (),
    is_watched: Callable[[Path], bool] | None = None,
) -> DirectoryListing:
    """List visible children of ``directory`` in display order.

    Directories come first, then files; each group is ordered by lower-cased
    display name.

    With ``show_hidden`` off, hidden names are dropped and files must match
    ``filters`` (their display names lose the matched suffixes). With it on,
    every child is listed under its real name. Children whose type cannot be
    determined are skipped. Never raises for filesystem errors.
    """
    filter_active = not show_hidden
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if filter_active and is_hidden_name(name):
                    continue

                try:
                    is_dir = child.is_dir()
                except OSError as exc:
                    logger.debug("Skipping %s: cannot determine type (%s)", child.path, exc)
                    continue

                display_name = name
                if filter_active and not is_dir:
                    if not matches_filters(name, filters):
                        continue
                    display_name = strip_filter_suffixes(name, filters)

                child_path = Path(child.path)
                watched = False
                if not is_dir and is_watched is not None:
                    watched = bool(is_watched(child_path))

                entries.append(
                    Entry(
                        path=child_path,
                        name=name,
                        display_name=display_name,
                        is_file=not is_dir,
                        is_watched=watched,
                    )
                )
    except OSError as exc:
        logger.info("Cannot list %s: %s", directory, exc)
        return DirectoryListing((), exc)

    entries.sort(key=lambda entry: (not entry.is_dir, entry.display_name.lower()))
    return DirectoryListing(tuple(entries), None)


__all__ = [
    "DirectoryListing",
    "Entry",
    "SYSTEM_NAMES",
    "is_hidden_name",
    "list_entries",
    "matches_filters",
    "strip_filter_suffixes",
]
