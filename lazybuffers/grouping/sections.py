"""Assemble per-category sections from collected records."""

from __future__ import annotations

from collections.abc import Sequence

from ..records import BufferRecord
from .partition import categories_of, records_of
from .paths import group_by_path, merge_singletons
from .types import CategorySection, Group, GroupedRecord


def build_sections(file_backed: Sequence[BufferRecord]) -> list[CategorySection]:
    """Return path-grouped sections for file-backed records, ordered by category."""
    return [
        CategorySection(category, tuple(group_by_path(records_of(file_backed, category))))
        for category in categories_of(file_backed)
    ]


def build_unbacked_groups(unbacked: Sequence[BufferRecord]) -> list[Group]:
    """Return one name-sorted group per category, singletons pooled at the end."""
    groups: list[Group] = []
    for category in categories_of(unbacked):
        members = sorted(records_of(unbacked, category), key=lambda record: record.name)
        groups.append(Group(tuple(GroupedRecord(record) for record in members)))
    return merge_singletons(groups)
