"""Composition of session, navigator, commands, and terminal loop."""

from __future__ import annotations

import sys
from dataclasses import replace

from ..commands import BufferListCommands
from ..logging import get_logger
from ..navigation import Navigator
from ..options import ListOptions
from ..pipeline import BufferListing, build_listing
from ..records import DocumentSession
from ..ui_theme import UITheme
from .config import save_highlight_relative_path
from .editor import EditorOpener
from .input import read_key
from .keys import build_list_key_registry
from .loop import ListLoopCallbacks, run_list_loop
from .terminal import TerminalController

logger = get_logger("app")


class BufferListApp:
    """Interactive buffer list over one ``DocumentSession``."""

    def __init__(self, session: DocumentSession, options: ListOptions) -> None:
        self.session = session
        self.options = options
        self.navigator = Navigator(self.rebuild)
        self.commands = BufferListCommands(
            self.navigator,
            session,
            session,
            list_surface_name=options.list_surface_name,
        )
        self.quit_requested = False
        self.keys = build_list_key_registry(
            self.commands,
            quit_list=self.request_quit,
            toggle_relative_paths=self.toggle_relative_paths,
            show_help=self.show_help,
        )

    def rebuild(self) -> BufferListing:
        return build_listing(self.session, self.options)

    def request_quit(self) -> bool:
        self.quit_requested = True
        return True

    def toggle_relative_paths(self) -> bool:
        """Flip directory display mode, persist it, and rebuild in place."""
        enabled = not self.options.highlight_relative_path
        self.options = replace(self.options, highlight_relative_path=enabled)
        save_highlight_relative_path(enabled)
        self.commands.last_message = "relative directories" if enabled else "full directories"
        self.navigator.refresh_and_reselect()
        return True

    def show_help(self, text: str) -> bool:
        self.commands.last_message = text
        return True

    def dispatch_key(self, key: str) -> bool | None:
        handled = self.keys.dispatch(key)
        if handled is None:
            logger.debug("Unbound key %r", key)
        return handled

    def should_exit(self) -> bool:
        return self.quit_requested or self.session.selected is not None

    def status_text(self) -> str:
        message = self.commands.last_message
        if message:
            return message
        return f"{self.options.list_surface_name} · {self.navigator.listing.summary()}"


def run_buffer_list(
    session: DocumentSession,
    options: ListOptions,
    theme: UITheme,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> str | None:
    """Run the interactive list; return the selected path/name, if any."""
    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    terminal = TerminalController(stdin_fd, stdout_fd)
    session.set_opener(EditorOpener(terminal.suspended))

    app = BufferListApp(session, options)
    app.commands.open_list()
    run_list_loop(
        app.navigator,
        terminal,
        ListLoopCallbacks(
            read_key=lambda: read_key(stdin_fd),
            dispatch_key=app.dispatch_key,
            should_exit=app.should_exit,
            status_text=app.status_text,
        ),
        theme,
    )
    return session.selected
