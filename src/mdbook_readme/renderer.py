"""Render pipeline for mdbook render context -> README.md."""

from __future__ import annotations

import logging
from collections import Counter

from pydantic import ValidationError

from mdbook_readme.config import DEFAULT_RENDERER_NAME, resolve_root
from mdbook_readme.exceptions import RenderContextError
from mdbook_readme.formatter import Classification, iter_steps
from mdbook_readme.schemas import Chapter, RenderContext, RenderResult
from mdbook_readme.version_check import check_version
from mdbook_readme.writer import write_readme

logger = logging.getLogger(__name__)


def load_render_context(raw: str | bytes) -> RenderContext:
    """Parse the JSON render context mdbook writes to the backend's stdin.

    Raises:
        RenderContextError: If the payload is not a valid render context.
    """
    try:
        return RenderContext.model_validate_json(raw)
    except ValidationError as exc:
        raise RenderContextError(f"Invalid render context: {exc}") from exc


def render_book(
    ctx: RenderContext,
    *,
    check: bool = True,
    write: bool = True,
    renderer: str = DEFAULT_RENDERER_NAME,
) -> RenderResult:
    """Format the book in ``ctx`` and write README.md to its destination.

    Args:
        ctx: Parsed render context.
        check: If True, reject render contexts from other mdbook versions.
        write: If True, write the output file; otherwise only return lines.
        renderer: Name of the ``[output.*]`` table holding the options.

    Returns:
        The rendered lines, the output path (when written) and a summary.
    """
    if check:
        check_version(ctx.version)

    root = resolve_root(ctx.config, renderer=renderer)
    counts: Counter[Classification] = Counter()
    lines: list[str] = []
    for result in iter_steps(ctx.book.iter_items(), root):
        if isinstance(result.item, Chapter):
            counts[result.classification] += 1
        lines.extend(result.lines)

    output_path = write_readme(lines, ctx.destination) if write else None
    summary = _summarize(counts, root)
    logger.info("Rendered README: %s", summary)
    return RenderResult(lines=lines, output_path=output_path, summary=summary)


def _summarize(counts: Counter[Classification], root: str) -> str:
    parts = [f"{kind.value}={counts[kind]}" for kind in Classification]
    parts.append(f"root={root}")
    return ", ".join(parts)
