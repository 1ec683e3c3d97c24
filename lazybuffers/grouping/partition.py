"""Category partitioning of document records."""

from __future__ import annotations

from collections.abc import Iterable

from ..records import BufferRecord


def split_file_backed(records: Iterable[BufferRecord]) -> tuple[list[BufferRecord], list[BufferRecord]]:
    """Return ``(file_backed, unbacked)`` preserving input order in each."""
    file_backed: list[BufferRecord] = []
    unbacked: list[BufferRecord] = []
    for record in records:
        (file_backed if record.is_file_backed else unbacked).append(record)
    return file_backed, unbacked


def categories_of(records: Iterable[BufferRecord]) -> list[str]:
    """Return distinct category tags in lexicographic order."""
    return sorted({record.category for record in records})


def records_of(records: Iterable[BufferRecord], category: str) -> list[BufferRecord]:
    """Return records tagged ``category`` in their original order."""
    return [record for record in records if record.category == category]
