"""Options recognized by the buffer-list pipeline."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LIST_SURFACE_NAME = "*Buffer List*"
DEFAULT_MOST_RECENT_COUNT = 1


@dataclass(frozen=True)
class ListOptions:
    """Display and recency options.

    ``highlight_relative_path`` switches directory display between the
    incremental remainder and the full directory. ``list_surface_name`` names
    the list itself so it is never listed. ``most_recent_count`` is how many
    of the most recently used documents are flagged as recent.
    """

    highlight_relative_path: bool = True
    list_surface_name: str = DEFAULT_LIST_SURFACE_NAME
    most_recent_count: int = DEFAULT_MOST_RECENT_COUNT
