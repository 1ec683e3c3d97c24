"""Command-line front door for lazybuffers.

Opens the given files as documents, then either prints the grouped list or
runs the interactive list and prints whatever gets selected.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .logging import configure_logging
from .pipeline import BufferListing, build_listing
from .records import DocumentSession
from .records.categories import DEFAULT_SCRATCH_CATEGORY
from .render import style_line
from .runtime import run_buffer_list
from .runtime.config import load_list_options, load_theme_name
from .ui_theme import UITheme, available_theme_names, resolve_theme


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def expand_document_paths(paths: list[Path]) -> list[Path]:
    """Return files to open: files as given, plus visible files directly inside directories."""
    files: list[Path] = []
    for path in paths:
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        if path.is_dir():
            files.extend(
                child
                for child in sorted(path.iterdir())
                if child.is_file() and not child.name.startswith(".")
            )
        else:
            files.append(path)
    return files


def parse_scratch_spec(spec: str) -> tuple[str, str]:
    """Split ``NAME[:CATEGORY]`` into name and category."""
    name, sep, category = spec.partition(":")
    name = name.strip()
    if not name:
        raise SystemExit(f"Invalid scratch document: {spec!r}")
    category = category.strip() if sep else ""
    return name, category or DEFAULT_SCRATCH_CATEGORY


def render_listing_text(listing: BufferListing, theme: UITheme) -> str:
    """Render every line of ``listing`` with theme colors for non-interactive output."""
    return "".join(style_line(line, theme) + "\n" for line in listing.lines)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and show the grouped list of the given documents.

    ``default_path`` is primarily for tests; when no paths or scratch documents
    are given the files of the current working directory are opened.
    """
    parser = argparse.ArgumentParser(
        description="Show open documents grouped by kind and directory lineage."
    )
    parser.add_argument("paths", nargs="*", help="Files or directories to open. Defaults to current directory.")
    parser.add_argument(
        "--scratch",
        action="append",
        default=[],
        metavar="NAME[:CATEGORY]",
        help="Add a document with no backing file (repeatable).",
    )
    parser.add_argument("--full-paths", action="store_true", help="Show full directories instead of remainders.")
    parser.add_argument(
        "--recent",
        type=_nonnegative_int,
        default=None,
        metavar="N",
        help="Number of most recently used documents to flag.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--nopager", action="store_true", help="Print the list and exit.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log records to this file.")
    args = parser.parse_args(argv)

    interactive = not args.nopager and sys.stdin.isatty() and sys.stdout.isatty()
    configure_logging(verbose=args.verbose, log_file=args.log_file, console=not interactive)

    options = load_list_options()
    if args.full_paths:
        options = replace(options, highlight_relative_path=False)
    if args.recent is not None:
        options = replace(options, most_recent_count=args.recent)

    raw_paths = [Path(path) for path in args.paths]
    if not raw_paths and not args.scratch:
        raw_paths = [default_path if default_path is not None else Path.cwd()]

    session = DocumentSession()
    session.open_paths(expand_document_paths(raw_paths))
    for spec in args.scratch:
        session.open_scratch(*parse_scratch_spec(spec))

    theme = resolve_theme(
        args.theme or load_theme_name(),
        no_color=args.no_color or not sys.stdout.isatty(),
    )
    if not interactive:
        sys.stdout.write(render_listing_text(build_listing(session, options), theme))
        return

    selected = run_buffer_list(session, options, theme)
    if selected is not None:
        sys.stdout.write(selected + "\n")


if __name__ == "__main__":
    main()
