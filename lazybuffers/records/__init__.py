"""Open-document records, collaborator contracts, and the CLI's registry."""

from __future__ import annotations

from .collector import check_record, collect_records
from .session import DocumentSession, OpenDocument, directory_string
from .types import (
    OPEN_TARGET_DIRECTORY,
    OPEN_TARGET_DOCUMENT,
    BufferRecord,
    DocumentActions,
    DocumentSource,
    RecordContractError,
)

__all__ = [
    "OPEN_TARGET_DIRECTORY",
    "OPEN_TARGET_DOCUMENT",
    "BufferRecord",
    "DocumentActions",
    "DocumentSource",
    "DocumentSession",
    "OpenDocument",
    "RecordContractError",
    "check_record",
    "collect_records",
    "directory_string",
]
