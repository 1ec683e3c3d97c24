"""Full rebuild of the buffer list: collect, partition, group, render."""

from __future__ import annotations

from dataclasses import dataclass, field

from .grouping import CategorySection, Group, build_sections, build_unbacked_groups, split_file_backed
from .logging import get_logger
from .options import ListOptions
from .records import BufferRecord, DocumentSource, collect_records
from .render import RenderedLine, render_listing

logger = get_logger("pipeline")


@dataclass(frozen=True)
class BufferListing:
    """Immutable snapshot of one rebuild; discarded wholesale on refresh."""

    records: tuple[BufferRecord, ...] = ()
    sections: tuple[CategorySection, ...] = ()
    unbacked_groups: tuple[Group, ...] = ()
    lines: tuple[RenderedLine, ...] = field(default_factory=tuple)

    def summary(self) -> str:
        count = len(self.records)
        noun = "document" if count == 1 else "documents"
        modified = sum(1 for record in self.records if record.modified)
        parts = [f"{count} {noun}"]
        if modified:
            parts.append(f"{modified} modified")
        return " · ".join(parts)


EMPTY_LISTING = BufferListing()


def listing_from_records(records: list[BufferRecord], options: ListOptions) -> BufferListing:
    """Group and render already-collected records."""
    file_backed, unbacked = split_file_backed(records)
    sections = build_sections(file_backed)
    unbacked_groups = build_unbacked_groups(unbacked)
    lines = render_listing(sections, unbacked_groups, relative_paths=options.highlight_relative_path)
    logger.debug(
        "Built listing: %d sections, %d other groups, %d lines",
        len(sections),
        len(unbacked_groups),
        len(lines),
    )
    return BufferListing(
        records=tuple(records),
        sections=tuple(sections),
        unbacked_groups=tuple(unbacked_groups),
        lines=tuple(lines),
    )


def build_listing(source: DocumentSource, options: ListOptions) -> BufferListing:
    """Read ``source`` once and rebuild the whole listing from scratch."""
    records = collect_records(
        source,
        options.most_recent_count,
        list_surface_name=options.list_surface_name,
    )
    return listing_from_records(records, options)
