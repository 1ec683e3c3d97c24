"""Boundary between the host document registry and the grouping pipeline."""

from __future__ import annotations

from dataclasses import replace

from ..logging import get_logger
from .types import BufferRecord, DocumentSource, RecordContractError

logger = get_logger("records")


def check_record(record: BufferRecord) -> BufferRecord:
    """Return ``record`` unchanged, raising when its path fields disagree."""
    if (record.directory is None) != (record.base_name is None):
        raise RecordContractError(
            f"document {record.name!r} has directory={record.directory!r} "
            f"but base_name={record.base_name!r}"
        )
    return record


def collect_records(
    source: DocumentSource,
    most_recent_count: int,
    list_surface_name: str | None = None,
) -> list[BufferRecord]:
    """Snapshot open documents in host order with ``recent`` flags applied.

    The recency set is computed once from the host's global order, before any
    grouping, so it does not depend on category or path. The list surface
    itself never appears in the result.
    """
    recent_names = set(source.most_recent_document_names(max(0, most_recent_count)))
    records: list[BufferRecord] = []
    for record in source.list_open_documents():
        if list_surface_name is not None and record.name == list_surface_name:
            continue
        check_record(record)
        records.append(replace(record, recent=record.name in recent_names))
    logger.debug("Collected %d records (%d recent)", len(records), len(recent_names))
    return records
