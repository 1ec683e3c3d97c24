"""Cursor movement over rendered list lines.

The scan helpers are pure functions from ``(lines, cursor)`` to a new cursor.
``Navigator`` keeps the current listing snapshot plus cursor and restores the
cursor by entry identity after every rebuild.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .pipeline import EMPTY_LISTING, BufferListing
from .render import RenderedLine


def first_entry_index(lines: Sequence[RenderedLine]) -> int:
    """Return index of the first entry line, or ``0`` when there is none."""
    for idx, line in enumerate(lines):
        if line.is_entry:
            return idx
    return 0


def next_entry_index(lines: Sequence[RenderedLine], cursor: int) -> int:
    """Return the next entry index after ``cursor``; ``cursor`` itself at the end."""
    idx = cursor + 1
    while 0 <= idx < len(lines):
        if lines[idx].is_entry:
            return idx
        idx += 1
    return cursor


def prev_entry_index(lines: Sequence[RenderedLine], cursor: int) -> int:
    """Return the previous entry index before ``cursor``; ``cursor`` itself at the start."""
    idx = min(cursor, len(lines)) - 1
    while idx >= 0:
        if lines[idx].is_entry:
            return idx
        idx -= 1
    return cursor


def goto_entry_index(lines: Sequence[RenderedLine], entry_id: str | None) -> int:
    """Return the last line showing ``entry_id``, else the first entry line."""
    if entry_id is not None:
        for idx in range(len(lines) - 1, -1, -1):
            if lines[idx].entry_id == entry_id:
                return idx
    return first_entry_index(lines)


class Navigator:
    """Cursor state machine over the current listing."""

    def __init__(self, rebuild: Callable[[], BufferListing]) -> None:
        self._rebuild = rebuild
        self.listing: BufferListing = EMPTY_LISTING
        self.cursor = 0

    @property
    def lines(self) -> tuple[RenderedLine, ...]:
        return self.listing.lines

    def current_line(self) -> RenderedLine | None:
        if 0 <= self.cursor < len(self.lines):
            return self.lines[self.cursor]
        return None

    def current_entry_id(self) -> str | None:
        line = self.current_line()
        return line.entry_id if line is not None else None

    def first_record_name(self) -> str | None:
        """Return the first record of the current snapshot in host order."""
        records = self.listing.records
        return records[0].name if records else None

    def _move_to(self, cursor: int) -> bool:
        moved = cursor != self.cursor
        self.cursor = cursor
        return moved

    def first_entry(self) -> bool:
        return self._move_to(first_entry_index(self.lines))

    def next_entry(self) -> bool:
        return self._move_to(next_entry_index(self.lines, self.cursor))

    def prev_entry(self) -> bool:
        return self._move_to(prev_entry_index(self.lines, self.cursor))

    def goto_entry(self, entry_id: str | None) -> bool:
        return self._move_to(goto_entry_index(self.lines, entry_id))

    def build(self) -> None:
        """Replace the listing and put the cursor on the first entry."""
        self.listing = self._rebuild()
        self.cursor = first_entry_index(self.lines)

    def refresh_and_reselect(self) -> None:
        """Rebuild the listing and return to the same entry by identity."""
        entry_id = self.current_entry_id() or self.first_record_name()
        self.listing = self._rebuild()
        self.goto_entry(entry_id)
