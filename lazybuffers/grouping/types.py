"""Grouped-record datatypes shared by grouping and rendering."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..records import BufferRecord


@dataclass(frozen=True)
class RelativePath:
    """Directory of a grouped record split at its anchor's directory."""

    prefix: str
    remainder: str

    @property
    def full(self) -> str:
        return self.prefix + self.remainder


@dataclass(frozen=True)
class GroupedRecord:
    """One record placed in a group; ``relative_path`` is ``None`` without a file."""

    record: BufferRecord
    relative_path: RelativePath | None = None

    @property
    def name(self) -> str:
        return self.record.name


@dataclass(frozen=True)
class Group:
    """Ordered records sharing a directory lineage (or a merged singleton bucket)."""

    members: tuple[GroupedRecord, ...]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[GroupedRecord]:
        return iter(self.members)

    def names(self) -> list[str]:
        return [member.name for member in self.members]


@dataclass(frozen=True)
class CategorySection:
    """All groups of one category tag."""

    category: str
    groups: tuple[Group, ...]
