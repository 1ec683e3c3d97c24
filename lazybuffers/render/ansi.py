"""Display-time ANSI styling and clipping of rendered lines."""

from __future__ import annotations

import re
import unicodedata

from ..ui_theme import DEFAULT_THEME, UITheme
from .lines import LINE_ENTRY, LINE_HEADER, RenderedLine

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def text_display_width(text: str) -> int:
    """Return terminal column width of plain text."""
    return sum(char_display_width(ch) for ch in text)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces to ``width`` terminal columns."""
    return text + " " * max(0, width - text_display_width(text))


def clip_text(text: str, max_cols: int) -> str:
    """Clip plain text to ``max_cols`` terminal columns."""
    out: list[str] = []
    col = 0
    for ch in text:
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
    return "".join(out)


def style_line(line: RenderedLine, theme: UITheme | None = None, max_cols: int | None = None) -> str:
    """Return ``line.text`` (clipped to ``max_cols``) wrapped in theme colors."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    text = line.text if max_cols is None else clip_text(line.text, max_cols)
    if not text:
        return ""
    if line.kind == LINE_HEADER:
        return f"{active_theme.list_header}{text}{reset}"
    if line.kind != LINE_ENTRY:
        return text

    flags, body = text[:2], text[2:]
    if line.modified:
        flags = f"{active_theme.list_modified}{flags}{reset}"
    if line.directory_column is not None:
        split_at = min(len(text), line.directory_column)
    elif line.category and text.endswith(line.category):
        split_at = len(text) - len(line.category)
    else:
        split_at = len(text)
    name_part, tail_part = body[: max(0, split_at - 2)], body[max(0, split_at - 2):]
    if line.recent:
        name_part = f"{active_theme.list_recent}{name_part}{reset}"
    if tail_part:
        tail_color = active_theme.list_directory if line.is_directory_link else active_theme.list_category
        tail_part = f"{tail_color}{tail_part}{reset}"
    return f"{flags}{name_part}{tail_part}"


def selected_with_ansi(text: str, theme: UITheme | None = None) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    active_theme = theme or DEFAULT_THEME
    if not active_theme.reverse:
        return text
    # Keep reverse video active even when the text contains internal resets.
    return active_theme.reverse + text.replace("\033[0m", "\033[0;7m") + "\033[0m"
