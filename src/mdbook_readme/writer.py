"""Write the rendered README to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from mdbook_readme.config import DEFAULT_OUTPUT_FILENAME
from mdbook_readme.exceptions import WriteError

logger = logging.getLogger(__name__)


def render_text(lines: Iterable[str]) -> str:
    """Join lines as they are written to the file, one newline after each."""
    return "".join(f"{line}\n" for line in lines)


def write_readme(
    lines: Iterable[str],
    destination: Path,
    filename: str = DEFAULT_OUTPUT_FILENAME,
) -> Path:
    """Write ``lines`` to ``destination/filename``.

    Args:
        lines: Output lines in order.
        destination: Directory to write into. Created if missing.
        filename: Name of the output file.

    Returns:
        Path of the written file.

    Raises:
        WriteError: If the directory or file cannot be written.
    """
    output_path = destination / filename
    try:
        destination.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", newline="\n") as handle:
            for line in lines:
                handle.write(f"{line}\n")
    except OSError as exc:
        raise WriteError(f"Failed to write {output_path}: {exc}") from exc
    logger.debug("Wrote %s", output_path)
    return output_path
