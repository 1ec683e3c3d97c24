"""Rendering of grouped records into navigable list lines."""

from __future__ import annotations

from .ansi import clip_text, selected_with_ansi, style_line, text_display_width
from .lines import LINE_BLANK, LINE_ENTRY, LINE_HEADER, RenderedLine, blank_line, header_line
from .listing import OTHER_HEADER, directory_text, flag_columns, render_listing

__all__ = [
    "LINE_BLANK",
    "LINE_ENTRY",
    "LINE_HEADER",
    "OTHER_HEADER",
    "RenderedLine",
    "blank_line",
    "clip_text",
    "directory_text",
    "flag_columns",
    "header_line",
    "render_listing",
    "selected_with_ansi",
    "style_line",
    "text_display_width",
]
