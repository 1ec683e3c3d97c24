"""Key-combo registry and the buffer-list key map."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..commands import BufferListCommands

KEY_DISPLAY_NAMES = {"ENTER_CR": "RET", "ENTER_LF": "RET"}


@dataclass(frozen=True)
class KeyComboBinding:
    """Key tokens bound to one action, with an optional help label."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]
    label: str | None = None


class KeyComboRegistry:
    """Exact-match key dispatch table that can describe its own bindings."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}
        self._labelled: list[KeyComboBinding] = []

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings in order; later combos overwrite earlier ones."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
            if binding.label:
                self._labelled.append(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke the handler bound to ``key``; ``None`` when unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()

    def help_text(self) -> str:
        """One-line summary of labelled bindings, keyed by their first combo."""
        return "  ".join(
            f"{KEY_DISPLAY_NAMES.get(binding.combos[0], binding.combos[0])} {binding.label}"
            for binding in self._labelled
        )


def build_list_key_registry(
    commands: BufferListCommands,
    *,
    quit_list: Callable[[], bool | None],
    toggle_relative_paths: Callable[[], bool | None],
    show_help: Callable[[str], bool | None],
) -> KeyComboRegistry:
    """Return the key map of the interactive buffer list; ``?`` shows its help."""
    registry = KeyComboRegistry().register_bindings(
        KeyComboBinding(("j", "n", "DOWN", "CTRL_N"), commands.next_entry, "next"),
        KeyComboBinding(("k", "p", "UP", "CTRL_P"), commands.prev_entry, "prev"),
        KeyComboBinding(("ENTER_CR", "ENTER_LF"), commands.select_entry, "select"),
        KeyComboBinding(("o",), commands.select_entry_in_split, "split"),
        KeyComboBinding(("+",), commands.open_directory_at_cursor, "dir"),
        KeyComboBinding(("O",), commands.open_directory_in_split_at_cursor, "dir-split"),
        KeyComboBinding(("g", "CTRL_L"), commands.refresh, "refresh"),
        KeyComboBinding(("d",), commands.delete_entry, "delete"),
        KeyComboBinding(("t",), toggle_relative_paths, "paths"),
        KeyComboBinding(("q", "ESC", "CTRL_C"), quit_list, "quit"),
    )
    return registry.register_bindings(KeyComboBinding(("?",), lambda: show_help(registry.help_text())))
