"""Tests for list scrolling and frame composition."""

from __future__ import annotations

import unittest

from lazybuffers.render import RenderedLine, header_line
from lazybuffers.render.lines import LINE_ENTRY
from lazybuffers.runtime.screen import compose_frame, scroll_start
from lazybuffers.ui_theme import DEFAULT_THEME, PLAIN_THEME


class ScrollStartTests(unittest.TestCase):
    def test_keeps_cursor_visible(self) -> None:
        self.assertEqual(scroll_start(cursor=0, start=0, rows=5, total=20), 0)
        self.assertEqual(scroll_start(cursor=7, start=0, rows=5, total=20), 3)
        self.assertEqual(scroll_start(cursor=2, start=3, rows=5, total=20), 2)

    def test_clamps_to_content(self) -> None:
        self.assertEqual(scroll_start(cursor=0, start=10, rows=5, total=3), 0)
        self.assertEqual(scroll_start(cursor=19, start=0, rows=5, total=20), 15)


class ComposeFrameTests(unittest.TestCase):
    def _lines(self) -> list[RenderedLine]:
        return [
            header_line("python"),
            RenderedLine("   a.py", entry_id="a.py", kind=LINE_ENTRY),
            RenderedLine("   b.py", entry_id="b.py", kind=LINE_ENTRY),
        ]

    def test_plain_frame_lists_rows_then_status(self) -> None:
        frame = compose_frame(self._lines(), cursor=1, start=0, rows=4, columns=40, status="2 documents", theme=PLAIN_THEME)
        self.assertTrue(frame.startswith("\x1b[H"))
        rows = frame[len("\x1b[H"):].split("\r\n")
        self.assertEqual(
            rows,
            ["python\x1b[K", "   a.py\x1b[K", "   b.py\x1b[K", "\x1b[K", "2 documents\x1b[K"],
        )

    def test_selected_entry_is_reversed(self) -> None:
        frame = compose_frame(self._lines(), cursor=2, start=0, rows=3, columns=40, status="", theme=DEFAULT_THEME)
        self.assertIn("\x1b[7m   b.py", frame)
        self.assertNotIn("\x1b[7m   a.py", frame)

    def test_status_is_clipped(self) -> None:
        frame = compose_frame([], cursor=0, start=0, rows=1, columns=4, status="abcdefgh", theme=PLAIN_THEME)
        self.assertTrue(frame.endswith("abcd\x1b[K"))


if __name__ == "__main__":
    unittest.main()
