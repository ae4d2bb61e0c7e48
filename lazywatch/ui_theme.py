"""UI theme definitions and selection helpers.

Themes map the renderer's semantic roles onto ANSI SGR sequences.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the painter."""

    name: str
    reset: str
    border: str
    title: str
    marker: str
    directory: str
    watched: str
    unwatched: str
    help_border: str
    help_text: str
    status: str

    def style_for(self, role: str) -> str:
        """Return the SGR prefix for ``role``; unknown roles are unstyled."""
        if role not in STYLE_ROLES:
            return ""
        return getattr(self, role)


STYLE_ROLES = frozenset(
    {
        "border",
        "title",
        "marker",
        "directory",
        "watched",
        "unwatched",
        "help_border",
        "help_text",
        "status",
    }
)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[37m",
    title="\033[1;37m",
    marker="\033[1;38;5;44m",
    directory="\033[1;34m",
    watched="\033[38;5;244m",
    unwatched="\033[38;5;229m",
    help_border="\033[38;5;45m",
    help_text="\033[38;5;252m",
    status="\033[1;38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    marker="\033[38;5;39m",
    directory="\033[1;38;5;45m",
    watched="\033[2;38;5;110m",
    unwatched="\033[38;5;153m",
    help_border="\033[38;5;39m",
    help_text="\033[38;5;153m",
    status="\033[38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    marker="",
    directory="",
    watched="",
    unwatched="",
    help_border="",
    help_text="",
    status="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "STYLE_ROLES",
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
