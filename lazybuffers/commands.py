"""User-facing buffer-list commands.

Each command returns whether it did anything; commands at a list boundary or
on a non-entry line leave everything unchanged. Every command clears
``last_message``; messages returned by host actions are kept there for the
status row until the next command.
"""

from __future__ import annotations

from collections.abc import Callable

from .logging import get_logger
from .navigation import Navigator
from .records import DocumentActions, DocumentSource

logger = get_logger("commands")


class BufferListCommands:
    """Bind a ``Navigator`` to host document actions."""

    def __init__(
        self,
        navigator: Navigator,
        source: DocumentSource,
        actions: DocumentActions,
        list_surface_name: str | None = None,
    ) -> None:
        self.navigator = navigator
        self.source = source
        self.actions = actions
        self.list_surface_name = list_surface_name
        self.last_message: str | None = None

    def _run_action(self, action: Callable[[str], str | None], argument: str) -> bool:
        self.last_message = action(argument)
        if self.last_message:
            logger.info("%s", self.last_message)
        return True

    def open_list(self) -> None:
        """Build the list and select the most recent document other than the list."""
        self.last_message = None
        self.navigator.build()
        candidates = [
            name
            for name in self.source.most_recent_document_names(2)
            if name != self.list_surface_name
        ]
        self.navigator.goto_entry(candidates[0] if candidates else None)

    def next_entry(self) -> bool:
        self.last_message = None
        return self.navigator.next_entry()

    def prev_entry(self) -> bool:
        self.last_message = None
        return self.navigator.prev_entry()

    def refresh(self) -> bool:
        self.last_message = None
        self.navigator.refresh_and_reselect()
        return True

    def select_entry(self) -> bool:
        self.last_message = None
        entry_id = self.navigator.current_entry_id()
        if entry_id is None:
            return False
        return self._run_action(self.actions.focus_document, entry_id)

    def select_entry_in_split(self) -> bool:
        self.last_message = None
        entry_id = self.navigator.current_entry_id()
        if entry_id is None:
            return False
        self._run_action(self.actions.focus_document_in_split, entry_id)
        self.navigator.refresh_and_reselect()
        return True

    def open_directory_at_cursor(self) -> bool:
        self.last_message = None
        line = self.navigator.current_line()
        if line is None or line.directory_ref is None:
            return False
        logger.debug("Opening directory %s", line.directory_ref)
        return self._run_action(self.actions.open_directory, line.directory_ref)

    def open_directory_in_split_at_cursor(self) -> bool:
        self.last_message = None
        line = self.navigator.current_line()
        if line is None or line.directory_ref is None:
            return False
        return self._run_action(self.actions.open_directory_in_split, line.directory_ref)

    def delete_entry(self) -> bool:
        """Delete the current document and land on its successor.

        The cursor steps to the next entry first, so the identity restored
        after the rebuild is the successor's.
        """
        self.last_message = None
        entry_id = self.navigator.current_entry_id()
        if entry_id is None:
            return False
        self.navigator.next_entry()
        logger.info("Deleting %s", entry_id)
        self._run_action(self.actions.delete_document, entry_id)
        self.navigator.refresh_and_reselect()
        return True
