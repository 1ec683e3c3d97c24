"""Rendered-line values produced by the list renderer."""

from __future__ import annotations

from dataclasses import dataclass

LINE_HEADER = "header"
LINE_ENTRY = "entry"
LINE_BLANK = "blank"


@dataclass(frozen=True)
class RenderedLine:
    """One line of the buffer list.

    Only lines with ``entry_id`` are navigable. ``directory_ref`` is the full
    directory of a file-backed entry; the directory portion of ``text`` starts
    at ``directory_column`` and is the only part flagged as a link.
    """

    text: str
    entry_id: str | None = None
    directory_ref: str | None = None
    is_directory_link: bool = False
    kind: str = LINE_BLANK
    directory_column: int | None = None
    category: str | None = None
    modified: bool = False
    recent: bool = False

    @property
    def is_entry(self) -> bool:
        return self.entry_id is not None


def header_line(title: str) -> RenderedLine:
    return RenderedLine(title, kind=LINE_HEADER, category=title)


def blank_line() -> RenderedLine:
    return RenderedLine("")
