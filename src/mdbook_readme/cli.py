"""Command-line entry point invoked by mdbook as an alternative backend."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from mdbook_readme.config import MDBOOK_README_LOG_LEVEL
from mdbook_readme.exceptions import MdbookReadmeError, RenderContextError
from mdbook_readme.renderer import load_render_context, render_book
from mdbook_readme.utils.logging_config import LOG_LEVELS, configure_logging, get_logger, resolve_level
from mdbook_readme.writer import render_text

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-readme",
        description="Render an mdbook book into a single README.md table of contents.",
    )
    parser.add_argument("--input", help="Read the render context from a file instead of stdin")
    parser.add_argument("--destination", help="Override the output directory from the render context")
    parser.add_argument("--stdout", action="store_true", help="Print the Markdown instead of writing README.md")
    parser.add_argument(
        "--skip-version-check",
        action="store_true",
        help="Accept render contexts from any mdbook version",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=resolve_level(MDBOOK_README_LOG_LEVEL),
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        raw = read_input(args.input)
        ctx = load_render_context(raw)
        if args.destination:
            ctx = ctx.model_copy(update={"destination": Path(args.destination)})
        result = render_book(ctx, check=not args.skip_version_check, write=not args.stdout)
    except MdbookReadmeError as exc:
        logger.error("mdbook-readme failed: %s", exc)
        return 1

    if args.stdout:
        sys.stdout.write(render_text(result.lines))
    else:
        logger.info("README written", extra={"path": str(result.output_path)})
    return 0


def read_input(file_path: str | None) -> bytes:
    """Read the raw render context from ``file_path`` or stdin."""
    if not file_path:
        try:
            return sys.stdin.buffer.read()
        except OSError as exc:
            raise RenderContextError(f"Failed to read stdin: {exc}") from exc

    path = Path(file_path)
    if not path.is_file():
        raise RenderContextError(f"Render context file not found: {path}")
    try:
        return path.read_bytes()
    except OSError as exc:
        raise RenderContextError(f"Failed to read {path}: {exc}") from exc


if __name__ == "__main__":
    raise SystemExit(main())
