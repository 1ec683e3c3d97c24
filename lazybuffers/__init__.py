"""Public package surface for lazybuffers.

Exports ``main`` for programmatic CLI invocation.
Grouping, rendering, and navigation live in submodules under ``lazybuffers``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
