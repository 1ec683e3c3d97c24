"""Git working-tree status used to seed document ``modified`` flags."""

from __future__ import annotations

import subprocess
from pathlib import Path


def _repo_root_for(path: Path, timeout_seconds: float) -> Path | None:
    proc = _run_git(path, ["rev-parse", "--show-toplevel"], timeout_seconds)
    if proc is None or proc.returncode != 0:
        return None
    lines = [line.strip() for line in proc.stdout.splitlines() if line.strip()]
    if not lines:
        return None
    return Path(lines[0]).resolve()


def _run_git(cwd: Path, args: list[str], timeout_seconds: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError):
        return None


def iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    """Split ``git status --porcelain=v1 -z`` output into ``(status, path)`` pairs."""
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        records.append((status, token[3:]))

        # Renames and copies carry the source path as an extra token.
        if "R" in status or "C" in status:
            index += 1

    return records


def collect_changed_paths(directory: Path, timeout_seconds: float = 0.25) -> set[Path]:
    """Return resolved paths of changed or untracked files in ``directory``'s repo.

    Returns an empty set when ``directory`` is not inside a git work tree or
    git cannot be run.
    """
    repo_root = _repo_root_for(directory, timeout_seconds)
    if repo_root is None:
        return set()

    proc = _run_git(
        repo_root,
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
        timeout_seconds,
    )
    if proc is None or proc.returncode != 0:
        return set()

    changed: set[Path] = set()
    for status, rel_path in iter_porcelain_records(proc.stdout):
        if not rel_path or status == "!!":
            continue
        changed.add((repo_root / rel_path).resolve())
    return changed
