"""In-process document registry backing the command-line buffer list.

Plays the host role for the grouping core: it owns the set of open
documents, their recency order and the actions the list can request.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from ..logging import get_logger
from .categories import DEFAULT_SCRATCH_CATEGORY, category_for_filename
from .git_status import collect_changed_paths
from .types import OPEN_TARGET_DIRECTORY, OPEN_TARGET_DOCUMENT, BufferRecord

logger = get_logger("session")

Opener = Callable[[Path, str], str | None]


@dataclass
class OpenDocument:
    """One registry entry; ``path`` is ``None`` for scratch documents."""

    name: str
    path: Path | None
    category: str
    modified: bool = False

    def to_record(self) -> BufferRecord:
        if self.path is None:
            return BufferRecord(self.name, None, None, self.category, self.modified)
        return BufferRecord(
            name=self.name,
            directory=directory_string(self.path.parent),
            base_name=self.path.name,
            category=self.category,
            modified=self.modified,
        )


def directory_string(directory: Path) -> str:
    """Return ``directory`` as text ending in a separator.

    The trailing separator keeps literal prefix tests honest: ``/p/x/`` is a
    prefix of ``/p/x/y/`` but not of ``/p/xy/``.
    """
    text = str(directory)
    return text if text.endswith(os.sep) else text + os.sep


class DocumentSession:
    """Ordered registry of open documents with a most-recent-first order.

    Newly opened documents queue behind existing ones; focusing a document
    moves it to the front. ``opener`` runs for split actions with the
    target path and its kind (``OPEN_TARGET_DOCUMENT`` or
    ``OPEN_TARGET_DIRECTORY``) and returns an error message or ``None``.
    """

    def __init__(self, opener: Opener | None = None) -> None:
        self._documents: dict[str, OpenDocument] = {}
        self._recency: list[str] = []
        self._opener = opener
        self.selected: str | None = None

    def set_opener(self, opener: Opener | None) -> None:
        self._opener = opener

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, name: object) -> bool:
        return name in self._documents

    def _unique_name(self, base: str) -> str:
        if base not in self._documents:
            return base
        suffix = 2
        while f"{base}<{suffix}>" in self._documents:
            suffix += 1
        return f"{base}<{suffix}>"

    def _add(self, document: OpenDocument) -> str:
        self._documents[document.name] = document
        self._recency.append(document.name)
        return document.name

    def open_path(self, path: Path, modified: bool = False) -> str:
        """Open ``path`` (once) and return its document name."""
        resolved = path.resolve()
        for document in self._documents.values():
            if document.path == resolved:
                return document.name
        name = self._unique_name(resolved.name)
        return self._add(OpenDocument(name, resolved, category_for_filename(resolved.name), modified))

    def open_paths(self, paths: Iterable[Path], detect_modified: bool = True) -> list[str]:
        """Open several files, flagging the ones git reports as changed."""
        changed_by_directory: dict[Path, set[Path]] = {}
        names: list[str] = []
        for path in paths:
            resolved = path.resolve()
            modified = False
            if detect_modified:
                parent = resolved.parent
                if parent not in changed_by_directory:
                    changed_by_directory[parent] = collect_changed_paths(parent)
                modified = resolved in changed_by_directory[parent]
            names.append(self.open_path(resolved, modified=modified))
        return names

    def open_scratch(self, name: str, category: str = DEFAULT_SCRATCH_CATEGORY) -> str:
        """Open a document with no backing file."""
        return self._add(OpenDocument(self._unique_name(name), None, category))

    def mark_modified(self, name: str, modified: bool = True) -> None:
        document = self._documents.get(name)
        if document is not None:
            document.modified = modified

    def list_open_documents(self) -> list[BufferRecord]:
        return [self._documents[name].to_record() for name in self._recency]

    def most_recent_document_names(self, count: int) -> list[str]:
        return self._recency[: max(0, count)]

    def _bump(self, name: str) -> bool:
        if name not in self._documents:
            return False
        self._recency.remove(name)
        self._recency.insert(0, name)
        return True

    def _open_external(self, target: Path, kind: str) -> str | None:
        if self._opener is None:
            return f"No opener configured for {kind} {target}"
        return self._opener(target, kind)

    def focus_document(self, name: str) -> str | None:
        if not self._bump(name):
            return f"No such document: {name}"
        document = self._documents[name]
        self.selected = str(document.path) if document.path is not None else document.name
        return None

    def focus_document_in_split(self, name: str) -> str | None:
        if not self._bump(name):
            return f"No such document: {name}"
        document = self._documents[name]
        if document.path is None:
            return f"{name} has no file to open"
        return self._open_external(document.path, OPEN_TARGET_DOCUMENT)

    def delete_document(self, name: str) -> str | None:
        document = self._documents.pop(name, None)
        if document is None:
            return None
        self._recency.remove(name)
        logger.info("Closed %s", name)
        return None

    def open_directory(self, path: str) -> str | None:
        self.selected = path
        return None

    def open_directory_in_split(self, path: str) -> str | None:
        return self._open_external(Path(path), OPEN_TARGET_DIRECTORY)
