"""Public runtime entry points.

Groups the interactive list bootstrap (``run_buffer_list``) with the
persisted-config helpers used by the CLI.
"""

from __future__ import annotations


def run_buffer_list(*args, **kwargs):
    """Lazily import the interactive entrypoint to keep package imports light."""
    from .app import run_buffer_list as _run_buffer_list

    return _run_buffer_list(*args, **kwargs)


__all__ = ["run_buffer_list"]
