"""Turn grouped sections into the ordered lines of the buffer list."""

from __future__ import annotations

from collections.abc import Sequence

from ..grouping import CategorySection, Group, GroupedRecord
from ..records import BufferRecord
from .ansi import pad_to_width, text_display_width
from .lines import LINE_ENTRY, RenderedLine, blank_line, header_line

OTHER_HEADER = "other"
NAME_GAP = "  "


def flag_columns(record: BufferRecord) -> str:
    """Return the two status columns: ``*`` for modified, ``.`` for recent."""
    return ("*" if record.modified else " ") + ("." if record.recent else " ")


def directory_text(member: GroupedRecord, relative: bool) -> str:
    """Return the displayed directory of a file-backed member.

    In relative mode, members anchored on an earlier member show only their
    remainder, indented so it starts where the anchor's directory ends.
    """
    rel = member.relative_path
    if rel is None:
        return ""
    if not relative or not rel.prefix:
        return rel.full
    return " " * text_display_width(rel.prefix) + rel.remainder


def _name_width(sections: Sequence[CategorySection], unbacked_groups: Sequence[Group]) -> int:
    names = [member.name for section in sections for group in section.groups for member in group]
    names.extend(member.name for group in unbacked_groups for member in group)
    return max((text_display_width(name) for name in names), default=0)


def _file_entry_line(member: GroupedRecord, name_width: int, relative: bool) -> RenderedLine:
    record = member.record
    lead = f"{flag_columns(record)} {pad_to_width(record.name, name_width)}{NAME_GAP}"
    text = (lead + directory_text(member, relative)).rstrip()
    return RenderedLine(
        text,
        entry_id=record.name,
        directory_ref=record.directory,
        is_directory_link=True,
        kind=LINE_ENTRY,
        directory_column=len(lead),
        category=record.category,
        modified=record.modified,
        recent=record.recent,
    )


def _unbacked_entry_line(member: GroupedRecord, name_width: int) -> RenderedLine:
    record = member.record
    text = f"{flag_columns(record)} {pad_to_width(record.name, name_width)}{NAME_GAP}{record.category}".rstrip()
    return RenderedLine(
        text,
        entry_id=record.name,
        kind=LINE_ENTRY,
        category=record.category,
        modified=record.modified,
        recent=record.recent,
    )


def render_listing(
    sections: Sequence[CategorySection],
    unbacked_groups: Sequence[Group],
    relative_paths: bool = True,
) -> list[RenderedLine]:
    """Render file-backed sections, then the ``other`` section.

    Every group is followed by a blank separator line. An empty document set
    renders to no lines at all.
    """
    if not sections and not unbacked_groups:
        return []

    name_width = _name_width(sections, unbacked_groups)
    lines: list[RenderedLine] = []
    for section in sections:
        lines.append(header_line(section.category))
        for group in section.groups:
            lines.extend(_file_entry_line(member, name_width, relative_paths) for member in group)
            lines.append(blank_line())

    lines.append(header_line(OTHER_HEADER))
    for group in unbacked_groups:
        lines.extend(_unbacked_entry_line(member, name_width) for member in group)
        lines.append(blank_line())
    return lines
