"""Watched-file history persisted as a JSON key set.

Keys are POSIX-style paths relative to the media root when the file lies
under it, otherwise POSIX absolute paths. Every read and write goes through
``key_for`` so lookups match insertions after a restart.

Each mutation rewrites the whole file. There is no locking and no atomic
rename: two processes writing the same history file race, last writer wins.
"""

from __future__ import annotations

import json
import os
from pathlib import Path, PurePosixPath

from .logging_config import get_logger

logger = get_logger("history")


def normalize_history_key(path: Path | str, media_root: Path | None) -> str:
    """Return the canonical history key for ``path``.

    Relative inputs are taken relative to ``media_root`` (or the working
    directory when no root is known). Trailing separators never survive.
    """
    candidate = Path(path).expanduser()
    if not candidate.is_absolute() and media_root is not None:
        candidate = media_root / candidate
    candidate = Path(os.path.abspath(candidate))
    try:
        candidate = candidate.resolve()
    except (OSError, RuntimeError):
        pass

    if media_root is not None:
        try:
            root = Path(os.path.abspath(media_root.expanduser())).resolve()
        except (OSError, RuntimeError):
            root = Path(os.path.abspath(media_root.expanduser()))
        if candidate != root and candidate.is_relative_to(root):
            return PurePosixPath(*candidate.relative_to(root).parts).as_posix()
    return candidate.as_posix()


class HistoryStore:
    """Set of watched keys with synchronous full-file persistence."""

    def __init__(self, path: Path, media_root: Path | None = None, keys: set[str] | None = None) -> None:
        self.path = path
        self.media_root = media_root
        self._keys: set[str] = set(keys or ())

    @classmethod
    def load(cls, path: Path, media_root: Path | None = None) -> HistoryStore:
        """Read ``path`` into a store; unreadable or malformed files load empty."""
        return cls(path, media_root, read_history_keys(path))

    @staticmethod
    def initialize(path: Path) -> bool:
        """Create an empty history file when the data directory is usable.

        Returns ``True`` when the file exists afterwards.
        """
        if path.exists():
            return True
        directory = path.parent
        if not directory.is_dir() or not os.access(directory, os.W_OK | os.X_OK):
            logger.warning("History directory %s is not accessible; history will not persist", directory)
            return False
        try:
            path.write_text(json.dumps({"history": []}, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to create history file %s: %s", path, exc)
            return False
        logger.info("Created history file %s", path)
        return True

    @property
    def keys(self) -> frozenset[str]:
        return frozenset(self._keys)

    def key_for(self, path: Path | str) -> str:
        return normalize_history_key(path, self.media_root)

    def contains(self, path: Path | str) -> bool:
        return self.key_for(path) in self._keys

    def add(self, path: Path | str) -> None:
        self._keys.add(self.key_for(path))
        self._persist()

    def remove(self, path: Path | str) -> None:
        self._keys.discard(self.key_for(path))
        self._persist()

    def toggle(self, path: Path | str) -> bool:
        """Flip membership for ``path`` and return the new watched state."""
        if self.contains(path):
            self.remove(path)
            return False
        self.add(path)
        return True

    def _persist(self) -> None:
        # First-run creation belongs to startup; a missing file stays missing.
        if not self.path.exists():
            logger.debug("History file %s missing; skipping write", self.path)
            return
        payload = {"history": sorted(self._keys)}
        try:
            self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write history %s: %s", self.path, exc)


def read_history_keys(path: Path) -> set[str]:
    """Decode ``{"history": [...]}``; non-string members are dropped."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return set()
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Failed to read history %s: %s", path, exc)
        return set()
    if not isinstance(data, dict):
        logger.warning("History %s is not a JSON object", path)
        return set()
    raw = data.get("history")
    if not isinstance(raw, list):
        return set()
    return {item for item in raw if isinstance(item, str) and item}


__all__ = [
    "HistoryStore",
    "normalize_history_key",
    "read_history_keys",
]
