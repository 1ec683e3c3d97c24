"""Directory-lineage clustering of file-backed records.

Records are sorted by ``(directory, base_name)`` and scanned once. A record
joins the open group when the directory of the group's last member (tried
first) or of its first member is a literal string prefix of its own
directory; the member it matched becomes the anchor of its relative path.
Anything else opens a new group.

Each newly opened group is placed in front of the ones opened before it, so
group order is the reverse of opening order. Groups of one record are then
pooled into a single trailing group.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..records import BufferRecord
from .types import Group, GroupedRecord, RelativePath


def sort_by_path(records: Iterable[BufferRecord]) -> list[BufferRecord]:
    """Stable sort by directory, then file name."""
    return sorted(records, key=lambda record: (record.directory or "", record.base_name or ""))


def _anchor_for(record: BufferRecord, members: list[GroupedRecord]) -> BufferRecord | None:
    directory = record.directory or ""
    tail = members[-1].record
    if directory.startswith(tail.directory or ""):
        return tail
    head = members[0].record
    if directory.startswith(head.directory or ""):
        return head
    return None


def cluster_by_directory(records: Iterable[BufferRecord]) -> list[Group]:
    """Cluster file-backed records by directory prefix containment.

    Returned groups are in reverse opening order; members within a group keep
    path order.
    """
    opened: list[list[GroupedRecord]] = []
    current: list[GroupedRecord] | None = None
    for record in sort_by_path(records):
        assert record.directory is not None, f"{record.name!r} has no directory"
        if current is not None:
            anchor = _anchor_for(record, current)
            if anchor is not None:
                anchor_directory = anchor.directory or ""
                relative = RelativePath(anchor_directory, record.directory[len(anchor_directory):])
                current.append(GroupedRecord(record, relative))
                continue
        current = [GroupedRecord(record, RelativePath("", record.directory))]
        opened.append(current)
    return [Group(tuple(members)) for members in reversed(opened)]


def merge_singletons(groups: Iterable[Group]) -> list[Group]:
    """Keep multi-member groups in order and pool singletons into one trailing group."""
    kept: list[Group] = []
    singles: list[GroupedRecord] = []
    for group in groups:
        if len(group) >= 2:
            kept.append(group)
        else:
            singles.extend(group.members)
    if singles:
        kept.append(Group(tuple(singles)))
    return kept


def group_by_path(records: Iterable[BufferRecord]) -> list[Group]:
    """Full path grouping for the file-backed records of one category."""
    return merge_singletons(cluster_by_directory(records))
