"""Main interactive event loop for the buffer list.

The loop only draws frames and forwards keys; every feature lives in the
injected callbacks.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..navigation import Navigator
from ..ui_theme import UITheme
from .screen import compose_frame, scroll_start
from .terminal import TerminalController


@dataclass(frozen=True)
class ListLoopCallbacks:
    """Injected operations used by ``run_list_loop``."""

    read_key: Callable[[], str]
    dispatch_key: Callable[[str], bool | None]
    should_exit: Callable[[], bool]
    status_text: Callable[[], str]


def run_list_loop(
    navigator: Navigator,
    terminal: TerminalController,
    callbacks: ListLoopCallbacks,
    theme: UITheme,
) -> None:
    """Draw and dispatch until a callback requests exit or input ends."""
    start = 0
    with terminal.raw_mode():
        while not callbacks.should_exit():
            term = shutil.get_terminal_size((80, 24))
            rows = max(1, term.lines - 1)
            start = scroll_start(navigator.cursor, start, rows, len(navigator.lines))
            terminal.write(
                compose_frame(
                    navigator.lines,
                    navigator.cursor,
                    start,
                    rows,
                    term.columns,
                    callbacks.status_text(),
                    theme,
                )
            )
            key = callbacks.read_key()
            if not key:
                break
            callbacks.dispatch_key(key)
