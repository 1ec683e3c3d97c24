"""Record datatypes and collaborator contracts for the buffer list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

# Kinds of target a split opener is asked to show.
OPEN_TARGET_DOCUMENT = "document"
OPEN_TARGET_DIRECTORY = "directory"


class RecordContractError(ValueError):
    """Raised when a collaborator hands over a malformed document record."""


@dataclass(frozen=True)
class BufferRecord:
    """Metadata snapshot of one open document.

    ``directory`` and ``base_name`` are either both set (file-backed document)
    or both ``None``. ``name`` is the stable identity used by navigation.
    """

    name: str
    directory: str | None
    base_name: str | None
    category: str
    modified: bool = False
    recent: bool = False

    @property
    def is_file_backed(self) -> bool:
        return self.directory is not None


class DocumentSource(Protocol):
    """Read side of the host document registry."""

    def list_open_documents(self) -> list[BufferRecord]: ...

    def most_recent_document_names(self, count: int) -> list[str]: ...


class DocumentActions(Protocol):
    """Actions the buffer list asks the host to perform."""

    def focus_document(self, name: str) -> str | None: ...

    def focus_document_in_split(self, name: str) -> str | None: ...

    def delete_document(self, name: str) -> str | None: ...

    def open_directory(self, path: str) -> str | None: ...

    def open_directory_in_split(self, path: str) -> str | None: ...
