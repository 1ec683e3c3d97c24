"""Split opener that shows documents and directories in ``$EDITOR``.

The list has no split windows of its own, so "open in split" hands the
target to the user's editor while the terminal leaves list mode, then
returns to the list. Failures come back as status-row messages.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Callable, Mapping
from contextlib import AbstractContextManager
from pathlib import Path

from ..logging import get_logger
from ..records import OPEN_TARGET_DIRECTORY

logger = get_logger("editor")


def editor_command(environ: Mapping[str, str]) -> list[str]:
    """Return ``$EDITOR`` split into argv; raise ``ValueError`` if unusable."""
    words = shlex.split(environ.get("EDITOR", ""))
    if not words:
        raise ValueError("$EDITOR is not set")
    return words


class EditorOpener:
    """Callable opener for ``DocumentSession.set_opener``.

    ``suspend`` returns a context manager that leaves list mode for the
    duration of the editor run.
    """

    def __init__(
        self,
        suspend: Callable[[], AbstractContextManager[object]],
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.suspend = suspend
        self.environ = os.environ if environ is None else environ

    def __call__(self, target: Path, kind: str) -> str | None:
        try:
            command = editor_command(self.environ)
        except ValueError as exc:
            return f"Cannot open {kind} {target}: {exc}"
        if kind == OPEN_TARGET_DIRECTORY and not target.is_dir():
            return f"Directory {target} no longer exists"

        logger.debug("Opening %s %s with %s", kind, target, command[0])
        with self.suspend():
            try:
                completed = subprocess.run([*command, str(target)], check=False)
            except OSError as exc:
                return f"Cannot open {kind} {target}: {exc}"
        if completed.returncode != 0:
            return f"{command[0]} exited with status {completed.returncode} on {kind} {target}"
        return None
