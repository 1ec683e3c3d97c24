"""Tests for opening split targets in ``$EDITOR``."""

from __future__ import annotations

import subprocess
import tempfile
import unittest
from contextlib import contextmanager
from pathlib import Path
from unittest import mock

from lazybuffers.records import OPEN_TARGET_DIRECTORY, OPEN_TARGET_DOCUMENT, DocumentSession
from lazybuffers.runtime.editor import EditorOpener, editor_command


class _Suspender:
    def __init__(self) -> None:
        self.events: list[str] = []

    @contextmanager
    def __call__(self):
        self.events.append("leave")
        try:
            yield
        finally:
            self.events.append("enter")


class EditorCommandTests(unittest.TestCase):
    def test_splits_editor_with_arguments(self) -> None:
        self.assertEqual(editor_command({"EDITOR": "code --wait"}), ["code", "--wait"])

    def test_blank_editor_is_rejected(self) -> None:
        for environ in ({}, {"EDITOR": "   "}):
            with self.assertRaisesRegex(ValueError, "not set"):
                editor_command(environ)


class EditorOpenerTests(unittest.TestCase):
    def test_document_runs_editor_while_suspended(self) -> None:
        suspend = _Suspender()
        opener = EditorOpener(suspend, environ={"EDITOR": "vi -R"})
        target = Path("/tmp/lazybuffers-edit/one.py")

        def fake_run(argv, check):
            suspend.events.append("run")
            return subprocess.CompletedProcess(argv, 0)

        with mock.patch("lazybuffers.runtime.editor.subprocess.run", side_effect=fake_run) as run:
            self.assertIsNone(opener(target, OPEN_TARGET_DOCUMENT))

        run.assert_called_once_with(["vi", "-R", str(target)], check=False)
        self.assertEqual(suspend.events, ["leave", "run", "enter"])

    def test_missing_editor_names_target_kind(self) -> None:
        suspend = _Suspender()
        opener = EditorOpener(suspend, environ={})
        message = opener(Path("/tmp/lazybuffers-edit/one.py"), OPEN_TARGET_DOCUMENT)
        self.assertEqual(message, "Cannot open document /tmp/lazybuffers-edit/one.py: $EDITOR is not set")
        self.assertEqual(suspend.events, [])

    def test_vanished_directory_is_reported_without_running_editor(self) -> None:
        opener = EditorOpener(_Suspender(), environ={"EDITOR": "vi"})
        with tempfile.TemporaryDirectory() as tmp:
            gone = Path(tmp) / "gone"
            with mock.patch("lazybuffers.runtime.editor.subprocess.run") as run:
                message = opener(gone, OPEN_TARGET_DIRECTORY)
        run.assert_not_called()
        self.assertEqual(message, f"Directory {gone} no longer exists")

    def test_launch_failure_and_exit_status_become_messages(self) -> None:
        suspend = _Suspender()
        opener = EditorOpener(suspend, environ={"EDITOR": "nope"})
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            with mock.patch(
                "lazybuffers.runtime.editor.subprocess.run",
                side_effect=FileNotFoundError("no such editor"),
            ):
                message = opener(directory, OPEN_TARGET_DIRECTORY)
            self.assertEqual(message, f"Cannot open directory {directory}: no such editor")
            self.assertEqual(suspend.events, ["leave", "enter"])

            with mock.patch(
                "lazybuffers.runtime.editor.subprocess.run",
                return_value=subprocess.CompletedProcess(["nope"], 2),
            ):
                message = opener(directory, OPEN_TARGET_DIRECTORY)
            self.assertEqual(message, f"nope exited with status 2 on directory {directory}")

    def test_session_passes_directory_kind_for_directory_split(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            session = DocumentSession(opener=EditorOpener(_Suspender(), environ={}))
            message = session.open_directory_in_split(tmp)
        self.assertEqual(message, f"Cannot open directory {Path(tmp)}: $EDITOR is not set")


if __name__ == "__main__":
    unittest.main()
