"""Full-screen frame composition for the interactive list."""

from __future__ import annotations

from collections.abc import Sequence

from ..render import RenderedLine, clip_text, selected_with_ansi, style_line
from ..ui_theme import DEFAULT_THEME, UITheme


def scroll_start(cursor: int, start: int, rows: int, total: int) -> int:
    """Return the first visible line index keeping ``cursor`` on screen."""
    rows = max(1, rows)
    if cursor < start:
        start = cursor
    elif cursor >= start + rows:
        start = cursor - rows + 1
    return max(0, min(start, max(0, total - rows)))


def compose_frame(
    lines: Sequence[RenderedLine],
    cursor: int,
    start: int,
    rows: int,
    columns: int,
    status: str,
    theme: UITheme | None = None,
) -> str:
    """Return one full frame: ``rows`` list rows followed by the status row."""
    active_theme = theme or DEFAULT_THEME
    out: list[str] = ["\x1b[H"]
    for row in range(rows):
        idx = start + row
        text = ""
        if idx < len(lines):
            text = style_line(lines[idx], active_theme, max_cols=columns)
            if idx == cursor and lines[idx].is_entry:
                text = selected_with_ansi(text, active_theme)
        out.append(text + "\x1b[K\r\n")
    status_text = clip_text(status, columns)
    out.append(f"{active_theme.status}{status_text}{active_theme.reset}\x1b[K")
    return "".join(out)
