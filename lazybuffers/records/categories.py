"""Document category tags derived from file names."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

DEFAULT_FILE_CATEGORY = "text"
DEFAULT_SCRATCH_CATEGORY = "fundamental"


@lru_cache(maxsize=512)
def category_for_filename(file_name: str) -> str:
    """Return the lowercased Pygments lexer name for ``file_name``.

    Files Pygments does not recognize fall back to ``"text"``.
    """
    try:
        lexer = get_lexer_for_filename(file_name)
    except ClassNotFound:
        return DEFAULT_FILE_CATEGORY
    return lexer.name.lower()
