"""Persistent JSON config helpers.

Stores directory display mode, list surface name, recency count, and theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..options import DEFAULT_LIST_SURFACE_NAME, DEFAULT_MOST_RECENT_COUNT, ListOptions

APP_NAME = "lazybuffers"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks the list.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_highlight_relative_path() -> bool:
    """Return whether directories display as incremental remainders.

    Only explicit booleans are accepted; anything else means ``True``.
    """
    value = load_config().get("highlight_relative_path")
    return value if isinstance(value, bool) else True


def save_highlight_relative_path(enabled: bool) -> None:
    config = load_config()
    config["highlight_relative_path"] = bool(enabled)
    save_config(config)


def load_list_surface_name() -> str:
    value = load_config().get("list_surface_name")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_LIST_SURFACE_NAME
    return value


def load_most_recent_count() -> int:
    """Return how many most-recent documents to flag.

    Booleans, non-integers, and negative values fall back to the default.
    """
    value = load_config().get("most_recent_count")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_MOST_RECENT_COUNT
    return value


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_list_options() -> ListOptions:
    """Read all list options from one config snapshot."""
    return ListOptions(
        highlight_relative_path=load_highlight_relative_path(),
        list_surface_name=load_list_surface_name(),
        most_recent_count=load_most_recent_count(),
    )
