"""UI theme definitions and selection helpers.

Themes are ANSI palettes applied to rendered list lines at display time; the
rendered lines themselves carry no styling.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    list_header: str
    list_directory: str
    list_modified: str
    list_recent: str
    list_category: str
    status: str
    status_message: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    list_header="\033[1;38;5;81m",
    list_directory="\033[38;5;110m",
    list_modified="\033[38;5;214m",
    list_recent="\033[1m",
    list_category="\033[2;38;5;250m",
    status="\033[2;38;5;250m",
    status_message="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    list_header="\033[1;38;5;45m",
    list_directory="\033[38;5;117m",
    list_modified="\033[38;5;209m",
    list_recent="\033[1;38;5;153m",
    list_category="\033[2;38;5;110m",
    status="\033[2;38;5;110m",
    status_message="\033[38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    list_header="",
    list_directory="",
    list_modified="",
    list_recent="",
    list_category="",
    status="",
    status_message="",
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
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
